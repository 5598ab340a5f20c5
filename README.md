# eostui

Building blocks for a terminal console that manages EOS storage clusters.
These pieces turn cluster state into fixed-width text tables and detail
panels. The package does not contact a cluster and does not start other
programs.

## What it provides

- `eostui.paths`: namespace path handling. `clean_path` returns an absolute
  path, `parent_path` returns the parent directory (the root is its own
  parent) and `resolve_namespace_path` resolves user input. Absolute input
  replaces the current path, relative input is joined onto it, and empty
  input keeps it.
- `eostui.formatting`: value formatting. `human_bytes` uses binary units such
  as `1.5 KiB`. `human_bytes_rate` uses decimal units such as `2.50 MB/s`.
  `format_duration` gives output such as `3h25m10s`. `format_time` gives
  RFC 3339 in local time and `format_time_short` gives `YYYY-MM-DD HH:MM`.
  The module also has `usage_percent`, `fallback`, `entry_type_label` and
  `entry_size`.
- `eostui.layout`: table and panel layout.
  - `TableColumn` describes a column with `title`, `min_width`, `max_width`,
    `weight` and `right`.
  - `allocate_table_columns` shares a width between columns.
    `content_aware_columns` widens columns to fit their titles and cells.
  - `format_table_row`, `truncate`, `pad_left` and `pad_right` pad and cut
    text by display width. `text_width` measures display width and ignores
    ANSI escapes.
  - `visible_window` and `render_scroll_summary` handle scrolling.
  - `split_view_heights` and `adaptive_split_heights` divide a height between
    the list panel and the detail panel.
  - `fit_lines`, `panel_content_width`, `panel_content_height` and
    `clamp_index` are smaller helpers.
- `eostui.records`: namespace entries (`Entry`, `EntryKind`).
- `eostui.access`: access rules.
  - `AccessRecord` holds one rule.
  - `actions_for_record` returns the actions offered for an allowed or banned
    user, group, host or domain, each as an `AccessAction` with its
    `AccessActionKind` and `eos access ...` command.
  - `available_actions_label`, `action_verb` and `access_count` are helpers
    for the same records.
- `eostui.nodes`: nodes and filesystems.
  - `FstRecord` and `FileSystemRecord` hold their state.
  - `node_row` and `filesystem_row` return their table cells.
  - `node_status_toggle_target` returns the current state and the state a
    toggle would set. It raises `ValueError` when the state is neither on nor
    off.
- `eostui.topology`: MGM and QuarkDB hosts.
  - `mgm_rows` and `qdb_rows` build the host tables from `MgmRecord`s, with
    leaders first and then by host and port (`sort_topology_rows`).
  - `visible_table_indices` chooses the rows to show.
  - `wrapped_popup_lines` wraps text hard at a width for popups.
  - `qdb_coup_remote_args` returns the raft-coup command.
- `eostui.inspector`: inspector statistics.
  - Records: `InspectorLayoutSummary`, `InspectorCostRecord` and
    `InspectorBin`.
  - Labels and summaries: `format_inspector_bin_label`,
    `format_inspector_layout`, `format_inspector_cost`,
    `inspector_bin_summary` and `inspector_error_summary`.
  - Table rows: `layout_rows`, `cost_rows` and `inspector_bins_rows`.
- `eostui.stats`: the statistics view.
  - `StatsTable` is built by `layouts_table`, `costs_table` and `bins_table`.
  - `stats_list_natural_width` and `stats_pane_widths` size the two panes.
  - `offset_window`, `crop_line` and `adjusted_offset_x` handle scrolling in
    both directions.

## What it does not do

The package has no interactive screen, no command to run, and no client that
queries a cluster or applies changes. It builds rows, labels, command
arguments and layout sizes. Rendering them in a terminal and running any
command is left to the caller.

## Installation

```
pip install .
```

## Example

```python
from eostui.formatting import human_bytes
from eostui.layout import TableColumn, allocate_table_columns, format_table_row

columns = allocate_table_columns(40, [
    TableColumn("name", min_width=10, weight=3),
    TableColumn("size", min_width=8, right=True),
])
print(format_table_row(columns, ["data.root", human_bytes(1536)]))
```

## Running the tests

```
pip install .[test]
pytest
```