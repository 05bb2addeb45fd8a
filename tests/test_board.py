from tetris_config import COLS, ROWS
from tetris_piece import KINDS, Piece, template_for, rotate_cw
from tetris_board import new_board, collide, merge, clear_full_lines, filled_cells

GRAY = "#888888"


def full_board():
    return [[GRAY]*COLS for _ in range(ROWS)]


def rotations(kind):
    s = template_for(kind)
    for _ in range(4):
        yield s
        s = rotate_cw(s)


def test_new_board_dimensions():
    b = new_board()
    assert len(b) == ROWS and all(len(r) == COLS for r in b)
    assert filled_cells(b) == 0


def test_out_of_bounds_always_collides():
    for board in (new_board(), full_board()):
        for kind in KINDS:
            for shape in rotations(kind):
                for x in range(-5, COLS + 2):
                    for y in range(-5, ROWS + 2):
                        cells = [(x+c, y+r) for r, row in enumerate(shape) for c, v in enumerate(row) if v]
                        if any(bx < 0 or bx >= COLS or by >= ROWS for bx, by in cells):
                            assert collide(board, shape, x, y)


def test_cells_above_board_skip_settled_check_but_not_walls():
    b = full_board()
    o = template_for("O")
    assert not collide(b, o, 4, -2)
    assert collide(b, o, 4, -1)
    assert collide(b, o, -1, -2)
    assert collide(b, o, COLS - 1, -2)


def test_settled_cell_collision():
    b = new_board()
    b[10][5] = GRAY
    o = template_for("O")
    assert collide(b, o, 4, 9)
    assert collide(b, o, 5, 10)
    assert not collide(b, o, 6, 9)
    assert not collide(b, o, 4, 7)


def test_merge_writes_color_and_skips_rows_above_board():
    b = new_board()
    p = Piece.new("I")
    p.shape = rotate_cw(p.shape)  # vertical, column 2
    p.x, p.y = 0, -2
    merge(b, p)
    assert filled_cells(b) == 2
    assert b[0][2] == b[1][2] == p.color


def test_clear_on_board_without_full_rows_is_a_no_op():
    b = new_board()
    b[ROWS-1] = [GRAY]*(COLS-1) + [None]
    b[3][3] = GRAY
    before = [r[:] for r in b]
    assert clear_full_lines(b) == 0
    assert clear_full_lines(b) == 0
    assert b == before


def test_clear_all_rows():
    b = full_board()
    assert clear_full_lines(b) == ROWS
    assert filled_cells(b) == 0
    assert len(b) == ROWS


def test_clear_keeps_order_and_rechecks_shifted_rows():
    b = new_board()
    b[ROWS-1] = [GRAY]*COLS
    b[ROWS-2] = [GRAY]*COLS
    b[ROWS-3] = ["#a"] + [None]*(COLS-1)
    b[ROWS-4] = [GRAY]*COLS
    b[ROWS-5] = [None]*(COLS-1) + ["#b"]
    assert clear_full_lines(b) == 3
    assert b[ROWS-1] == ["#a"] + [None]*(COLS-1)
    assert b[ROWS-2] == [None]*(COLS-1) + ["#b"]
    assert filled_cells(b) == 2


def test_single_cell_into_gap_clears_bottom_row():
    b = new_board()
    b[ROWS-1] = [GRAY]*(COLS-1) + [None]
    b[ROWS-2][0] = "#second"
    merge(b, Piece("X", [[1]], "#123456", COLS-1, ROWS-1))
    assert clear_full_lines(b) == 1
    assert b[ROWS-1] == ["#second"] + [None]*(COLS-1)
