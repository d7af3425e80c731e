"""
命令列介面

使用方法:
    python main.py maze.png
    python main.py mazes/ --output results/ --seed 42
"""

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path

from maze_tools.common import MarkerColor, MarkerFilterConfig, MazeError
from maze_tools.core import MazeProcessor
from maze_tools.data_model import BatchResult, MazeReport, SolveConfig
from maze_tools.settings import AppSettings


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """建立參數解析器"""
    parser = argparse.ArgumentParser(
        prog="maze-tools",
        description="將迷宮圖片分解為連通分量，並判斷起點與終點是否連通",
    )
    parser.add_argument("image", type=Path, help="迷宮圖片 (或包含多張圖片的資料夾)")
    parser.add_argument(
        "-o", "--output", type=Path, default=None, help="標籤圖輸出路徑 (資料夾模式為輸出資料夾)"
    )
    parser.add_argument("--seed", type=int, default=None, help="調色盤亂數種子")
    parser.add_argument("--no-show", action="store_true", help="不開啟標籤圖視窗")
    parser.add_argument("--strict", action="store_true", help="標記少於兩個時視為錯誤")
    parser.add_argument(
        "--marker-color",
        choices=[c.value for c in MarkerColor],
        default=None,
        help="起點/終點標記顏色",
    )
    parser.add_argument("--tolerance", type=int, default=None, help="標記顏色每通道誤差")
    parser.add_argument("--threshold", type=int, default=None, help="開狀態的明度閾值 (0-255)")
    parser.add_argument("-v", "--verbose", action="store_true", help="顯示除錯訊息")
    return parser


def resolve_config(args: argparse.Namespace, settings: AppSettings) -> SolveConfig:
    """
    合併環境設定與命令列參數 (命令列優先)

    Args:
        args: 解析後的命令列參數
        settings: 應用程式設定

    Returns:
        求解設定
    """
    marker_color = args.marker_color or settings.marker_color
    tolerance = args.tolerance if args.tolerance is not None else settings.marker_tolerance

    return SolveConfig(
        on_threshold=args.threshold if args.threshold is not None else settings.on_threshold,
        marker_filter=MarkerFilterConfig.from_preset(marker_color, tolerance=tolerance),
        highlight_color=settings.highlight_color,
        first_component_color=settings.first_component_color,
        seed=args.seed if args.seed is not None else settings.seed,
        strict_markers=args.strict or settings.strict_markers,
        max_image_size=settings.max_image_size,
    )


def _print_report(report: MazeReport) -> None:
    print(report.has_solution)
    print(f"Number of components: {report.component_count}")
    if not report.endpoints_found:
        print("⚠️  標記像素不足兩個，缺少的端點以 (0,0) 代替")
    if report.output_path is not None:
        print(f"📂 輸出: {report.output_path}")


def _print_batch(result: BatchResult) -> None:
    print("\n" + "=" * 60)
    print("✅ 處理完成！".center(60))
    print("=" * 60)
    print(f"\n  📊 總計: {result.total} 張圖片")
    print(f"  ✅ 成功: {result.success} 張")
    if result.failed > 0:
        print(f"  ❌ 失敗: {result.failed} 張")
    for report in result.reports:
        verdict = "有解" if report.has_solution else "無解"
        print(f"  • {report.source.name}: {verdict}，{report.component_count} 個分量")
    print(f"  📂 輸出: {result.output_folder}")
    print("\n" + "=" * 60 + "\n")


def main(argv: Sequence[str] | None = None) -> int:
    """
    主程式

    Returns:
        退出碼 (0: 成功, 1: 失敗, 130: 中斷)
    """
    args = build_parser().parse_args(argv)

    try:
        settings = AppSettings()
        level = "DEBUG" if args.verbose else settings.log_level.upper()
        logging.basicConfig(level=level, format="%(message)s")

        config = resolve_config(args, settings)
        processor = MazeProcessor(config)

        if args.image.is_dir():
            result = processor.process_folder(args.image, args.output)
            _print_batch(result)
            return 0 if result.is_complete_success else 1

        report, image = processor.process_file(args.image, args.output)
        _print_report(report)
        if not args.no_show and args.output is None:
            image.show()
        return 0

    except KeyboardInterrupt:
        print("\n\n👋 已中斷操作，再見！")
        return 130

    except MazeError as exc:
        print(f"\n❌ 錯誤: {exc}\n")
        return 1

    except Exception:
        logger.exception("處理時發生錯誤")
        print("\n❌ 應用程式發生錯誤，請查看日誌\n")
        return 1
