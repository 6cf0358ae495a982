from mineboard.board_metrics import board_statistics, progress_percent, status_code, total_safe_cells


def test_total_safe_cells():
    assert total_safe_cells(rows=9, columns=9, mine_count=10) == 71
    assert total_safe_cells(rows=0, columns=0, mine_count=0) == 1


def test_progress_and_status(wall_board):
    assert status_code(wall_board) == "NEW"
    assert progress_percent(wall_board) == 0
    wall_board.reveal(0)
    assert status_code(wall_board) == "PROG"
    assert progress_percent(wall_board) == 50
    wall_board.reveal(4)
    assert status_code(wall_board) == "WON"
    assert progress_percent(wall_board) == 100


def test_statistics_after_loss(wall_board, clock):
    wall_board.reveal(0)
    clock.advance(12)
    wall_board.reveal(2)
    stats = board_statistics(wall_board)
    assert stats["status"] == "LOST"
    assert stats["game_lost"] and not stats["game_won"]
    assert stats["opened_count"] == 6
    assert stats["flags_remaining"] == 3
    assert stats["elapsed"] == 12.0
