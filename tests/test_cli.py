"""Command-line entry point tests."""

from pixelbatch.cli.batch_process import main


class TestCli:

    def test_missing_argument(self, capsys):
        assert main([]) == 1
        out = capsys.readouterr().out
        assert "Error loading from folder." in out
        assert "No folder name found; check arguments." in out

    def test_missing_folder(self, tmp_path, capsys):
        assert main([str(tmp_path / "nowhere")]) == 1
        out = capsys.readouterr().out
        assert "Error loading from folder." in out
        assert "Folder not found or could not be read." in out

    def test_file_is_not_a_folder(self, tmp_path, capsys):
        target = tmp_path / "file.png"
        target.write_bytes(b"")
        assert main([str(target)]) == 1
        assert "Folder not found or could not be read." in capsys.readouterr().out

    def test_writes_to_output_in_cwd(self, input_dir, tmp_path, monkeypatch):
        workdir = tmp_path / "work"
        workdir.mkdir()
        monkeypatch.chdir(workdir)
        assert main([str(input_dir)]) == 0
        assert (workdir / "output" / "square-composite.png").exists()
        assert not (input_dir / "output").exists()
