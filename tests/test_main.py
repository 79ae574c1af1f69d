"""End-to-end runs of the command-line entry point."""

import json

import pytest

from config import ArtworkConfig, save_config
from main import main


@pytest.fixture
def config_file(tmp_path, small_artwork):
    path = tmp_path / 'artwork.json'
    save_config(small_artwork, str(path))
    return path


@pytest.mark.parametrize("piece", ['forces', 'piet'])
def test_writes_outputs(config_file, small_artwork, piece):
    main(['--config', str(config_file), '--piece', piece, '--quiet'])
    artwork = ArtworkConfig(piece=piece, seed=small_artwork.seed, output_base=small_artwork.output_base)
    assert artwork.svg_path.exists()
    assert artwork.stats_path.exists()
    assert artwork.config_snapshot_path.exists()
    assert not artwork.png_path.exists()


def test_png_preview_and_seed(config_file, small_artwork):
    result = main(['--config', str(config_file), '--seed', '8', '--png', '--preview', '--quiet'])
    artwork = ArtworkConfig(seed=8, output_base=small_artwork.output_base)
    assert artwork.png_path.exists()
    assert artwork.preview_path.exists()
    data = json.loads(artwork.paths_data_path.read_text())
    assert data['metadata'] == {'piece': 'forces', 'seed': 8}
    assert len(data['paths']) == len(result.paths)


def test_profile_report(config_file, capsys):
    main(['--config', str(config_file), '--piece', 'piet', '--quiet', '--profile'])
    assert 'GROWTH PROFILE' in capsys.readouterr().out
