"""
Tests for image/text outputs and the batch entry point
"""

import cv2
import numpy as np

import main
from config import COLOR_BACKGROUND, FACE_PALETTE, CELL_SIZE_PX
from utils.figure_io import load_figures, figure_name
from visualization.draw_faces import new_canvas, draw_faces, cell_rect
from visualization.rectangle_renderer import get_figure_rectangles
from visualization.save_outputs import save_all_outputs
from sample_figures import TWO_BANDS, HAT, T_JUNCTION, NESTED


class TestDrawFaces:
    def test_canvas_size(self):
        decomposition = get_figure_rectangles(HAT)
        img = new_canvas(decomposition.grid)
        assert img.shape == (6 * CELL_SIZE_PX, 15 * CELL_SIZE_PX, 3)
        assert tuple(img[0, 0]) == COLOR_BACKGROUND

    def test_faces_are_filled(self):
        decomposition = get_figure_rectangles(HAT)
        img = draw_faces(new_canvas(decomposition.grid), decomposition.faces)
        (x, y), _ = cell_rect(1, 5)
        assert tuple(img[y, x]) == FACE_PALETTE[0]
        (x, y), _ = cell_rect(0, 0)
        assert tuple(img[y, x]) == COLOR_BACKGROUND


class TestSaveOutputs:
    def test_save_all_outputs(self, tmp_path):
        decomposition = get_figure_rectangles(T_JUNCTION)
        save_all_outputs(str(tmp_path), "t", decomposition)

        text = (tmp_path / "t_rectangles.txt").read_text()
        blocks = text.strip("\n").split("\n\n")
        assert sorted(b + "\n" for b in blocks) == sorted(decomposition)

        img = cv2.imread(str(tmp_path / "t_faces.png"))
        assert img is not None
        assert img.shape[:2] == (5 * CELL_SIZE_PX, 9 * CELL_SIZE_PX)
        assert np.any(img != 255)


class TestFigureIO:
    def test_figure_name(self):
        assert figure_name("figures/t_junction.txt") == "t_junction"

    def test_load_figures_keeps_crlf(self, tmp_path):
        (tmp_path / "b.txt").write_bytes(b"+-+\r\n+-+\r\n")
        (tmp_path / "a.txt").write_text("+-+\n+-+\n")
        figures, names = load_figures(str(tmp_path / "*.txt"))
        assert names == ["a", "b"]
        assert figures[1] == "+-+\r\n+-+\r\n"


class TestMain:
    def test_batch(self, tmp_path, capsys):
        src = tmp_path / "figures"
        src.mkdir()
        (src / "bands.txt").write_text(TWO_BANDS)
        (src / "nested.txt").write_text(NESTED)
        out = tmp_path / "out"

        main.main(pattern=str(src / "*.txt"), output_dir=str(out))

        printed = capsys.readouterr().out
        assert "[OK] Finished bands: 3 rectangle(s)" in printed
        assert "[ERROR] nested:" in printed
        assert (out / "bands_rectangles.txt").exists()
        assert (out / "bands_faces.png").exists()
        assert not (out / "nested_rectangles.txt").exists()

    def test_no_match(self, tmp_path, capsys):
        main.main(pattern=str(tmp_path / "*.txt"), output_dir=str(tmp_path / "out"))
        assert "[ERROR] No figures matched pattern" in capsys.readouterr().out

    def test_process_figure_returns_none_on_error(self, tmp_path):
        assert main.process_figure(NESTED, "nested", str(tmp_path)) is None
