from main import main


def test_main_with_example_dataset(tmp_path, capsys):
    assert main(["--figures", str(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert "OPTICS ORDERING (min_pts=3, epsilon=100)" in out
    assert (tmp_path / "01_bubbles.png").exists()
    assert (tmp_path / "02_reachability.png").exists()


def test_main_reads_input_file(tmp_path, capsys):
    path = tmp_path / "points.txt"
    path.write_text("0 0 A\n0 1 B\n0 2 C\n10 10 D\n")
    assert main(["--input", str(path), "--min-pts", "2", "--epsilon", "5", "--no-plots"]) == 0
    assert "3 of 4 points are core points" in capsys.readouterr().out


def test_main_reports_bad_input(tmp_path, capsys):
    path = tmp_path / "points.txt"
    path.write_text("0 0 A\nnot a point here\n")
    assert main(["--input", str(path), "--no-plots"]) == 1
    assert "line 2" in capsys.readouterr().err


def test_main_rejects_bad_configuration(capsys):
    assert main(["--min-pts", "0", "--no-plots"]) == 1
    assert "min_pts" in capsys.readouterr().err
