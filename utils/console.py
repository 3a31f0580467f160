def render_board(game):
    """
    用制表符绘制棋盘: 外框双线, 内部单线, 第0行显示在最下方
    末尾附带移动次数和分数

    参数:
    game: Twenty48Game

    返回:
    text: 可直接打印的字符串
    """
    rows, cols = game.rows, game.cols
    # 默认每格4个字符, 数字更长时加宽
    width = max(4, len(str(game.board.max_tile())))
    bar_double = "═" * width
    bar_single = "─" * width

    lines = ["╔" + "╤".join([bar_double] * cols) + "╗"]
    for row in range(rows - 1, -1, -1):
        cells = []
        for col in range(cols):
            value = game.get_cell_value(row, col)
            cells.append(f"{value:>{width}d}" if value else " " * width)
        lines.append("║" + "│".join(cells) + "║")
        if row > 0:
            lines.append("╟" + "┼".join([bar_single] * cols) + "╢")
    lines.append("╚" + "╧".join([bar_double] * cols) + "╝")
    lines.append(f"Moves Made: {game.move_count} Score: {game.score}")
    return "\n".join(lines)
