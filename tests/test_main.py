"""End-to-end tests for the command-line entry point."""

import random

import pytest
from PIL import Image

import config
from main import create_world, main, parse_args

TRIANGLE_OBJ = "v -0.2 0 0\nv 0.2 0 0\nv 0 0.3 0\nf 1 2 3\n"


def tiny_args(output, *extra):
    return ['--width', '8', '--height', '6', '--samples', '1', '--depth', '2',
            '--workers', '2', '--seed', '3', '--output', str(output), *extra]


class TestParseArgs:
    def test_defaults_come_from_config(self):
        args = parse_args([])
        assert args.width == config.RENDER_SETTINGS['width']
        assert args.samples == config.RENDER_SETTINGS['samples']
        assert args.depth == config.RENDER_SETTINGS['max_depth']
        assert args.use_bvh

    def test_quality_preset(self):
        args = parse_args(['--quality', 'preview'])
        assert (args.samples, args.depth) == (4, 4)

    def test_explicit_values_override_quality(self):
        args = parse_args(['--quality', 'final', '--samples', '2'])
        assert (args.samples, args.depth) == (2, 10)

    def test_mesh_scene_requires_mesh(self):
        with pytest.raises(SystemExit):
            parse_args(['--scene', 'mesh'])


class TestCreateWorld:
    @pytest.mark.parametrize("scene, count", [('spheres', 4), ('plane', 5)])
    def test_scene_sizes(self, scene, count):
        world, background = create_world(scene)
        assert len(world) == count

    def test_plane_scene_is_dimmer(self):
        _, spheres_bg = create_world('spheres')
        _, plane_bg = create_world('plane')
        assert plane_bg.x < spheres_bg.x

    def test_mesh_scene_adds_mesh(self, tmp_path):
        path = tmp_path / "tri.obj"
        path.write_text(TRIANGLE_OBJ)
        world, _ = create_world('mesh', mesh_path=str(path), rng=random.Random(0))
        assert len(world) == 6


class TestMain:
    def test_renders_png(self, tmp_path):
        out = tmp_path / "out.png"
        assert main(tiny_args(out)) == 0
        with Image.open(out) as img:
            assert img.size == (8, 6)
            assert img.mode == 'RGB'

    def test_seeded_runs_match(self, tmp_path):
        first, second = tmp_path / "a.png", tmp_path / "b.png"
        assert main(tiny_args(first, '--scene', 'plane')) == 0
        assert main(tiny_args(second, '--scene', 'plane', '--workers', '1')) == 0
        with Image.open(first) as a, Image.open(second) as b:
            assert a.tobytes() == b.tobytes()

    def test_bvh_does_not_change_image(self, tmp_path):
        with_bvh, without_bvh = tmp_path / "a.png", tmp_path / "b.png"
        assert main(tiny_args(with_bvh)) == 0
        assert main(tiny_args(without_bvh, '--no-bvh')) == 0
        with Image.open(with_bvh) as a, Image.open(without_bvh) as b:
            assert a.tobytes() == b.tobytes()

    def test_mesh_scene_with_texture(self, tmp_path):
        mesh = tmp_path / "tri.obj"
        mesh.write_text(TRIANGLE_OBJ)
        texture = tmp_path / "tex.png"
        Image.new('RGB', (4, 4), color=(200, 30, 30)).save(texture)
        out = tmp_path / "out.png"
        assert main(tiny_args(out, '--scene', 'mesh', '--mesh', str(mesh),
                              '--texture', str(texture))) == 0
        assert out.exists()

    def test_missing_mesh_fails_cleanly(self, tmp_path):
        out = tmp_path / "out.png"
        assert main(tiny_args(out, '--scene', 'mesh', '--mesh', str(tmp_path / "nope.obj"))) == 1
        assert not out.exists()

    def test_bad_settings_fail_cleanly(self, tmp_path):
        out = tmp_path / "out.png"
        assert main(tiny_args(out, '--samples', '0')) == 1
        assert not out.exists()

    def test_progress_bar_counts_rows(self, tmp_path, monkeypatch):
        bars = []

        class RecordingBar:
            def __init__(self, total, **kwargs):
                self.total = total
                self.kwargs = kwargs
                self.updates = []
                self.closed = False
                bars.append(self)

            def __enter__(self):
                return self

            def __exit__(self, *exc_info):
                self.closed = True

            def update(self, n=1):
                self.updates.append(n)

        monkeypatch.setattr("main.tqdm", RecordingBar)
        assert main(tiny_args(tmp_path / "out.png")) == 0
        assert len(bars) == 1
        bar = bars[0]
        assert bar.total == 6
        assert bar.kwargs['unit'] == "row"
        assert sum(bar.updates) == 6
        assert bar.closed

    def test_no_progress_bar_when_setup_fails(self, tmp_path, monkeypatch):
        opened = []
        monkeypatch.setattr("main.tqdm", lambda *args, **kwargs: opened.append(kwargs))
        assert main(tiny_args(tmp_path / "out.png", '--samples', '0')) == 1
        assert opened == []
