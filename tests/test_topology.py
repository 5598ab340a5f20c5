import pytest

from eostui.layout import text_width
from eostui.topology import (
    MgmRecord,
    TopologyHostKind,
    TopologyHostRow,
    mgm_rows,
    qdb_coup_remote_args,
    qdb_rows,
    sort_topology_rows,
    visible_table_indices,
    wrapped_popup_lines,
)


def _row(host, port=1094, role="follower"):
    return TopologyHostRow(TopologyHostKind.MGM, host, port, role, "ok", "-")


def test_mgm_rows_skip_missing_host_and_lowercase():
    nodes = [
        MgmRecord(host="", role="LEADER"),
        MgmRecord(host="mgm-b", port=1094, role="Follower", status="ONLINE", eos_version="5.2"),
        MgmRecord(host="mgm-a", port=1094, role="Leader", status="Online"),
    ]
    rows = mgm_rows(nodes)
    assert [row.host for row in rows] == ["mgm-a", "mgm-b"]
    assert rows[0].role == "leader"
    assert rows[0].status == "online"
    assert rows[0].version == "-"
    assert rows[1].version == "5.2"
    assert all(row.kind is TopologyHostKind.MGM for row in rows)


def test_qdb_rows_fall_back_to_mgm_role_and_status():
    nodes = [
        MgmRecord(host="m1", role="Leader", status="Online", qdb_host="q1", qdb_port=7777),
        MgmRecord(host="m2", role="follower", qdb_host="q2", qdb_port=7777,
                  qdb_role="LEADER", qdb_status="UP", qdb_version="0.4"),
        MgmRecord(host="m3"),
    ]
    rows = qdb_rows(nodes)
    assert len(rows) == 2
    assert all(row.kind is TopologyHostKind.QDB for row in rows)
    by_host = {row.host: row for row in rows}
    assert by_host["q1"].role == "leader"
    assert by_host["q1"].status == "online"
    assert by_host["q1"].version == "-"
    assert by_host["q2"].status == "up"
    assert by_host["q2"].version == "0.4"


def test_sort_puts_leader_first_then_host_then_port():
    rows = [_row("b", 2), _row("a", 9), _row("z", 1, "leader"), _row("a", 3)]
    sort_topology_rows(rows)
    assert [(row.host, row.port) for row in rows] == [("z", 1), ("a", 3), ("a", 9), ("b", 2)]


def test_qdb_coup_remote_args():
    assert qdb_coup_remote_args() == ["redis-cli", "-p", "7777", "raft-attempt-coup"]


@pytest.mark.parametrize("total,max_rows", [(0, 5), (5, 0), (-1, 3)])
def test_visible_indices_empty(total, max_rows):
    assert visible_table_indices(total, 0, max_rows) == []


def test_visible_indices_all_fit():
    assert visible_table_indices(4, 2, 10) == list(range(4))


@pytest.mark.parametrize("selected", [-3, 0, 5, 10, 17, 19])
def test_visible_indices_window_invariants(selected):
    result = visible_table_indices(20, selected, 6)
    assert len(result) == 6
    assert result == list(range(result[0], result[0] + 6))
    assert 0 <= result[0] and result[-1] < 20
    assert max(selected, 0) in result


def test_visible_indices_at_end_fills_window():
    assert visible_table_indices(20, 19, 6)[-1] == 19


def test_wrapped_lines_empty_text():
    assert wrapped_popup_lines("", 20) == [""]


def test_wrapped_lines_keep_blank_lines_and_strip_cr():
    assert wrapped_popup_lines("first\r\n   \r\nsecond", 20) == ["first", "", "second"]


def test_wrapped_lines_hard_wrap_preserves_text():
    text = "abcdefghij klmnopqrst uvwxyz"
    parts = wrapped_popup_lines(text, 7)
    assert "".join(parts) == text
    assert all(text_width(part) <= 7 for part in parts)
    assert len(parts) > 1


def test_wrapped_lines_remove_escape_sequences():
    parts = wrapped_popup_lines("\x1b[31mred\x1b[0m", 10)
    assert parts == ["red"]


def test_wrapped_lines_wide_characters_fit_width():
    parts = wrapped_popup_lines("日本語のテキスト", 5)
    assert all(text_width(part) <= 5 for part in parts)
    assert "".join(parts).replace("…", "") != ""