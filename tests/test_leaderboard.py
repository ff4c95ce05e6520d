from leaderboard import LeaderboardEntry, build_entry, rank_entries


def test_rank_by_score_keeps_ties_in_order():
    entries = [
        LeaderboardEntry("u1", 400, [[2] * 5] * 6),
        LeaderboardEntry("u2", 1000, [[0] * 5]),
        LeaderboardEntry("u3", 400, [[2] * 5] * 2),
        LeaderboardEntry("u4", 900, [[2] * 5, [0] * 5]),
        LeaderboardEntry("u5", 0, [[2] * 5] * 6),
        LeaderboardEntry("u6", 500, [[2] * 5] * 5 + [[0] * 5]),
    ]
    board = rank_entries(entries)

    assert [row["userId"] for row in board] == ["u2", "u4", "u6", "u1", "u3"]
    assert [row["rank"] for row in board] == [1, 2, 3, 4, 5]
    # fewer guesses does not move u3 ahead of u1
    assert board[3]["guessesCount"] == 6
    assert board[4]["guessesCount"] == 2


def test_rank_without_limit():
    entries = [LeaderboardEntry(f"u{i}", i * 10) for i in range(8)]
    assert len(rank_entries(entries, limit=None)) == 8
    assert rank_entries([]) == []


def test_build_entry_scores_history():
    entry = build_entry("U123", [[2, 1, 0, 2, 2], [0, 0, 0, 0, 0]])
    assert entry.score == 900
    assert entry.user_id == "U123"
    assert len(entry.guesses) == 2
