from drillbook.patterns import center_pattern, diagonal_pattern, stairs_down, stairs_up


def test_center_pattern_worked_example():
    assert center_pattern(9, 9, 3) == [
        "#########",
        "#*******#",
        "#*******#",
        "#*******#",
        "#***X***#",
        "#*******#",
        "#*******#",
        "#*******#",
        "#########",
    ]


def test_center_pattern_zero_distance_single_x():
    grid = center_pattern(5, 7, 0)
    assert len(grid) == 5
    assert all(len(row) == 7 for row in grid)
    text = "".join(grid)
    assert text.count("X") == 1
    assert "*" not in text
    assert grid[2][3] == "X"


def test_center_pattern_large_distance_fills():
    grid = center_pattern(4, 4, 10)
    assert "#" not in "".join(grid)
    assert "".join(grid).count("X") == 1


def test_diagonal_pattern_shape_and_symbols():
    grid = diagonal_pattern(5, 5)
    assert len(grid) == 5
    assert all(len(row) == 5 for row in grid)
    assert grid[2][2] == "X"
    for i in range(5):
        if i != 2:
            assert grid[i][i] == "\\"
            assert grid[i][4 - i] == "/"


def test_diagonal_pattern_symmetric_rows():
    grid = diagonal_pattern(7, 7)
    for row in grid:
        mirrored = row[::-1].translate(str.maketrans("\\/", "/\\"))
        assert mirrored == row


def test_stairs_down_worked_example():
    assert stairs_down(5) == [
        "***",
        "  ***",
        "    ***",
        "      ***",
        "        ***",
    ]


def test_stairs_up_worked_example():
    assert stairs_up(5) == [
        "        __",
        "        |",
        "      __",
        "      |",
        "    __",
        "    |",
        "  __",
        "  |",
        "__",
        "|",
    ]


def test_stairs_empty():
    assert stairs_down(0) == []
    assert stairs_up(0) == []


def test_stairs_up_line_count():
    assert len(stairs_up(8)) == 16
    assert stairs_up(8)[-2:] == ["__", "|"]