import pytest

import ui


def test_defaults():
    args = ui.get_args([])
    assert args.input_method == "demo"
    assert args.window == "sorted"
    assert args.window_size is None
    assert args.verbosity == "info"
    assert not args.check_invariants


def test_window_specific_args():
    args = ui.get_args(["--window", "heap", "--heap_compaction_factor", "4"])
    assert args.heap_compaction_factor == 4.0
    with pytest.raises(SystemExit):
        ui.get_args(["--heap_compaction_factor", "4"])


def test_config_file(tmp_path):
    path = tmp_path / "median.ini"
    path.write_text("[general]\n"
                    "window = heap\n"
                    "window_size = 5\n"
                    "check_invariants = true\n"
                    "heap_compaction_factor = 3\n"
                    "no_statistics = yes\n")
    args = ui.get_args(["--config_file", str(path)])
    assert args.window == "heap"
    assert args.window_size == 5
    assert args.check_invariants is True
    assert args.heap_compaction_factor == 3.0
    assert args.no_statistics is True
    # command line wins over the configuration file
    args = ui.get_args(["--config_file", str(path), "--window_size", "7"])
    assert args.window_size == 7


def test_missing_config_file(tmp_path):
    with pytest.raises(SystemExit):
        ui.get_args(["--config_file", str(tmp_path / "missing.ini")])


def test_validate_args(tmp_path):
    args = ui.get_args(["--window_size", "3"])
    ui.validate_args(args)
    args = ui.get_args(["--window_size", "0"])
    with pytest.raises(SystemExit):
        ui.validate_args(args)
    args = ui.get_args(["--window_size", "3", "--input_method", "file",
                        "--input_file", str(tmp_path / "missing.txt")])
    with pytest.raises(SystemExit):
        ui.validate_args(args)


def test_sanity_checks():
    args = ui.get_args(["--window_size", "3", "--outputs", "text,csv"])
    with pytest.raises(AttributeError):
        ui.validate_args(args)
    args = ui.get_args(["--window_size", "50", "--input_method", "dummy",
                        "--num_values", "10"])
    with pytest.raises(AttributeError):
        ui.validate_args(args)
    args.ignore_sanity_checks = True
    ui.validate_args(args)
