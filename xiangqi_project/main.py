#!/usr/bin/env python3
"""
Xiangqi Project 主入口文件

提供命令行接口，在终端中通过对局引擎下棋、查看棋盘和管理存档。
"""

import sys
from typing import List, Optional

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from xiangqi_project import __version__, __description__
from xiangqi_project.src.xiangqi_engine.config import ConfigManager, GameConfig
from xiangqi_project.src.xiangqi_engine.game import GameEngine
from xiangqi_project.src.xiangqi_engine.rules_engine import Board, Move
from xiangqi_project.src.xiangqi_engine.storage import save_to_file, load_from_file
from xiangqi_project.src.xiangqi_engine.utils import (
    setup_logger, teardown_logger, InvalidMoveError, XiangqiError
)

console = Console()

HELP_TEXT = """\
s <行> <列>      选子或走子（例如: s 6 4）
m <走法>         按坐标记法走子（例如: m e6e5）
c                取消选子
hint             查看选中棋子的合法落点
moves            列出当前一方的全部合法走法
u / r            悔棋 / 重做
n                新开一局
status           查看对局状态
save [路径]      保存对局
load [路径]      读取对局
q                退出"""


def print_banner():
    """打印项目横幅"""
    banner_text = Text()
    banner_text.append("♜ Xiangqi Project ♖\n", style="bold red")
    banner_text.append(f"版本: {__version__}\n", style="green")
    banner_text.append(__description__, style="white")

    panel = Panel(
        banner_text,
        title="中国象棋对弈系统",
        title_align="center",
        border_style="red",
        padding=(1, 2)
    )
    console.print(panel)


def render_board(engine: GameEngine):
    """打印当前棋盘与回合信息"""
    title = f"回合：{engine.side_to_move.display_name}"
    if engine.selected is not None:
        title += f"  已选中 {engine.selected}"
    console.print(Panel(engine.board.to_visual_string(), title=title, border_style="yellow"))


def render_status(engine: GameEngine):
    """打印对局状态"""
    status = engine.get_status()

    table = Table(title="对局状态")
    table.add_column("项目", style="cyan")
    table.add_column("值", style="white")
    table.add_row("轮到", engine.side_to_move.display_name)
    table.add_row("已走步数", str(engine.move_count))
    table.add_row("被将军", "是" if status.in_check else "否")
    table.add_row("将死", "是" if status.checkmate else "否")
    table.add_row("困毙", "是" if status.stalemate else "否")
    table.add_row("对局结束", status.game_over_reason or "否")
    console.print(table)


def _format_positions(positions: List) -> str:
    return " ".join(f"({row},{col})" for row, col in positions) or "无"


def _parse_ints(args: List[str], count: int, usage: str) -> List[int]:
    if len(args) != count:
        raise InvalidMoveError(" ".join(args), f"用法: {usage}")
    try:
        return [int(arg) for arg in args]
    except ValueError:
        raise InvalidMoveError(" ".join(args), "坐标必须是整数") from None


def _after_move(engine: GameEngine):
    status = engine.get_status()
    if status.game_over:
        console.print(f"[bold green]对局结束：{status.game_over_reason}[/bold green]")
    elif status.in_check:
        console.print(f"[bold red]{engine.side_to_move.display_name}被将！[/bold red]")


def run_command(engine: GameEngine, line: str, game_config: GameConfig) -> bool:
    """
    执行一条交互指令

    Args:
        engine: 对局引擎
        line: 用户输入
        game_config: 对局配置

    Returns:
        bool: 是否继续对局（输入 q 时返回False）
    """
    parts = line.split()
    if not parts:
        return True

    command, args = parts[0].lower(), parts[1:]

    try:
        if command in ('q', 'quit', 'exit'):
            return False

        elif command in ('s', 'select'):
            row, col = _parse_ints(args, 2, "s <行> <列>")
            had_selection = engine.selected is not None
            if engine.select_square(row, col):
                if had_selection:
                    render_board(engine)
                    _after_move(engine)
                elif game_config.show_legal_hints:
                    console.print(f"合法落点: {_format_positions(engine.get_legal_moves_of_selection())}")
            else:
                console.print("[yellow]无效的选择或走子[/yellow]")

        elif command in ('m', 'move'):
            if len(args) != 1:
                raise InvalidMoveError(" ".join(args), "用法: m <走法>")
            try:
                move = Move.from_coordinate_notation(args[0])
            except ValueError as e:
                raise InvalidMoveError(args[0], str(e)) from None

            engine.clear_selection()
            if engine.select_square(*move.from_pos) and engine.select_square(*move.to_pos):
                render_board(engine)
                _after_move(engine)
            else:
                engine.clear_selection()
                console.print(f"[yellow]非法走法: {move}[/yellow]")

        elif command in ('c', 'clear'):
            engine.clear_selection()
            console.print("已取消选子")

        elif command == 'hint':
            console.print(f"合法落点: {_format_positions(engine.get_legal_moves_of_selection())}")

        elif command == 'moves':
            legal_moves = engine.rules.generate_legal_moves(engine.board, engine.side_to_move)
            console.print(" ".join(str(move) for move in legal_moves) or "无合法走法")

        elif command in ('u', 'undo'):
            console.print("悔棋成功" if engine.undo() else "[yellow]没有可悔的棋[/yellow]")
            render_board(engine)

        elif command in ('r', 'redo'):
            console.print("重做成功" if engine.redo() else "[yellow]没有可重做的棋[/yellow]")
            render_board(engine)

        elif command in ('n', 'new'):
            engine.new_game()
            render_board(engine)

        elif command == 'status':
            render_status(engine)

        elif command == 'save':
            path = save_to_file(engine, args[0] if args else game_config.save_file)
            console.print(f"[green]已保存到 {path}[/green]")

        elif command == 'load':
            load_from_file(args[0] if args else game_config.save_file, engine)
            console.print("[green]读取对局成功[/green]")
            render_board(engine)

        elif command in ('h', 'help', '?'):
            console.print(HELP_TEXT)

        else:
            console.print(f"[red]未知指令: {command}[/red]，输入 help 查看帮助")

    except XiangqiError as e:
        console.print(f"[red]{e}[/red]")

    return True


@click.group()
@click.version_option(version=__version__, prog_name="Xiangqi Project")
@click.option('--debug', is_flag=True, help='启用调试模式')
@click.option('--config-dir', type=click.Path(file_okay=False), default='xiangqi_project/configs',
              help='配置文件目录')
@click.pass_context
def cli(ctx: click.Context, debug: bool, config_dir: str):
    """中国象棋对弈系统 - 规则引擎、对局管理与存档"""
    config_manager = ConfigManager(config_dir)
    system_config = config_manager.get_system_config()

    setup_logger(
        level='DEBUG' if debug else system_config.log_level,
        log_file=system_config.log_file or None,
        log_dir=system_config.log_dir,
        max_size=system_config.log_max_size,
        backup_count=system_config.log_backup_count,
        console_output=debug or system_config.console_output
    )
    ctx.call_on_close(teardown_logger)

    if debug:
        console.print("[yellow]调试模式已启用[/yellow]")

    ctx.obj = config_manager


@cli.command()
@click.option('--fen', type=str, help='FEN格式的棋局，默认显示初始局面')
@click.pass_obj
def show(config_manager: ConfigManager, fen: Optional[str]):
    """显示棋盘"""
    board_config = config_manager.get_board_config()
    try:
        board_config.validate()
    except XiangqiError as e:
        raise click.ClickException(str(e)) from e

    if fen:
        try:
            board, side = Board.from_fen(fen, board_config)
        except ValueError as e:
            raise click.BadParameter(str(e), param_hint='--fen') from e
    else:
        board, side = Board.initial(board_config), None

    title = f"轮到{side.display_name}" if side else "初始局面"
    console.print(Panel(board.to_visual_string(), title=title, border_style="yellow"))
    console.print(f"FEN: {board.to_fen(side) if side else board.to_fen()}")


@cli.command()
@click.option('--load', 'load_path', type=click.Path(dir_okay=False), help='开局时读取的存档')
@click.pass_obj
def play(config_manager: ConfigManager, load_path: Optional[str]):
    """在终端中开始对局"""
    try:
        engine = GameEngine(board_config=config_manager.get_board_config())
    except XiangqiError as e:
        raise click.ClickException(str(e)) from e
    game_config = config_manager.get_game_config()

    if load_path:
        try:
            load_from_file(load_path, engine)
        except XiangqiError as e:
            console.print(f"[red]{e}[/red]")

    console.print(HELP_TEXT)
    render_board(engine)

    while True:
        try:
            line = click.prompt("指令", default="", show_default=False)
        except click.Abort:
            break
        if not run_command(engine, line, game_config):
            break

    console.print("[blue]再见[/blue]")


@cli.command()
def info():
    """显示系统信息"""
    print_banner()


def main():
    """主入口函数"""
    try:
        cli()
    except KeyboardInterrupt:
        console.print("\n[yellow]程序被用户中断[/yellow]")
        sys.exit(0)


if __name__ == "__main__":
    main()
