import pytest

from describe_cli import main


def test_prints_description(capsys):
    assert main(["0", "0", "0.9", "0"]) == 0
    assert capsys.readouterr().out == "complete ecstasy\n"


def test_negative_values(capsys):
    assert main(["-0.3", "0.25", "0", "0"]) == 0
    assert capsys.readouterr().out == "mild anxiety\n"


def test_color_flag(capsys):
    main(["0.5", "0", "0", "0", "--color"])
    assert capsys.readouterr().out.splitlines() == ["anger", "#ff0000"]


def test_plot_writes_image(tmp_path, capsys):
    out = tmp_path / "wheel.png"
    main(["0", "0", "0.5", "0.4", "--plot", str(out), "--size", "200"])
    assert capsys.readouterr().out == "love\n"
    assert out.exists() and out.stat().st_size > 0


@pytest.mark.parametrize("argv", [
    ["0", "0", "0"],
    ["0", "x", "0", "0"],
    ["nan", "0", "0", "0"],
])
def test_bad_arguments_exit_2(argv):
    with pytest.raises(SystemExit) as exc:
        main(argv)
    assert exc.value.code == 2


def test_plot_leaves_pyplot_backend_alone(tmp_path):
    import matplotlib

    backend = matplotlib.get_backend()
    main(["0.2", "0", "0", "0", "--plot", str(tmp_path / "w.png")])
    assert matplotlib.get_backend() == backend
