import pandas as pd

from disjoint_hash_set import GroupingConfig, group_file
from disjoint_hash_set.__main__ import main, parse_args


def _write_edges(path):
    pd.DataFrame({"source": ["a", "b", "x"], "target": ["b", "c", "y"]}).to_csv(path, index=False)


def test_group_file_round_trip(tmp_path):
    source = tmp_path / "edges.csv"
    output = tmp_path / "groups.csv"
    _write_edges(source)

    result = group_file(source, output, GroupingConfig(use_tqdm=False, verbose=False))

    assert result is not None
    assert result.stats.group_count == 2
    written = pd.read_csv(output)
    groups = {}
    for key, group_id in zip(written["key"], written["group_id"]):
        groups.setdefault(group_id, set()).add(key)
    assert groups == {0: {"a", "b", "c"}, 1: {"x", "y"}}


def test_group_file_missing_input(tmp_path, capsys):
    assert group_file(tmp_path / "nope.csv", tmp_path / "out.csv") is None
    assert "ERROR: Input file not found" in capsys.readouterr().out


def test_group_file_unsupported_input(tmp_path, capsys):
    source = tmp_path / "edges.txt"
    source.write_text("a b\n")
    assert group_file(source, tmp_path / "out.csv") is None
    assert "Unsupported file format" in capsys.readouterr().out


def test_group_file_missing_column(tmp_path, capsys):
    source = tmp_path / "edges.csv"
    _write_edges(source)
    config = GroupingConfig(source_column="left", use_tqdm=False, verbose=False)
    assert group_file(source, tmp_path / "out.csv", config) is None
    assert "Column 'left' not found" in capsys.readouterr().out


def test_group_file_bad_output_format(tmp_path, capsys):
    source = tmp_path / "edges.csv"
    _write_edges(source)
    config = GroupingConfig(use_tqdm=False, verbose=False)
    assert group_file(source, tmp_path / "out.json", config) is None
    assert "Unsupported output file format" in capsys.readouterr().out


def test_parse_args_defaults(tmp_path):
    args = parse_args([str(tmp_path / "in.csv"), str(tmp_path / "out.csv")])
    assert args.source_column == "source"
    assert args.target_column == "target"
    assert not args.disable_tqdm
    assert not args.quiet


def test_main_exit_codes(tmp_path):
    source = tmp_path / "edges.csv"
    _write_edges(source)
    output = tmp_path / "groups.csv"
    assert main([str(source), str(output), "--quiet", "--disable-tqdm"]) == 0
    assert output.exists()
    assert main([str(tmp_path / "missing.csv"), str(output), "--quiet"]) == 1


def test_group_file_keeps_na_like_keys(tmp_path):
    source = tmp_path / "edges.csv"
    source.write_text("source,target\nNA,alpha\nnull,beta\nNone,gamma\nnan,N/A\ndelta,\n")
    config = GroupingConfig(use_tqdm=False, verbose=False)

    result = group_file(source, tmp_path / "groups.csv", config)

    assert result is not None
    assert result.groups == [{"NA", "alpha"}, {"null", "beta"}, {"None", "gamma"}, {"nan", "N/A"}, {"delta"}]
    assert result.stats.total_keys == 9


def test_group_file_empty_input(tmp_path, capsys):
    source = tmp_path / "edges.csv"
    source.write_text("")
    assert group_file(source, tmp_path / "out.csv") is None
    out = capsys.readouterr().out
    assert "is empty" in out
    assert "Unsupported file format" not in out
