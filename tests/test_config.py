from nhl235 import config


def test_reads_one_player_per_line(tmp_path):
    path = tmp_path / '.235.config'
    path.write_text('Laine\n\n  Barkov \r\nRantanen\n', encoding='utf-8')

    assert config.read_highlights(path) == ['Laine', 'Barkov', 'Rantanen']


def test_missing_file_means_no_highlights(tmp_path):
    assert config.read_highlights(tmp_path / 'nope') == []


def test_default_path_is_in_home(monkeypatch, tmp_path):
    monkeypatch.setenv('HOME', str(tmp_path))
    (tmp_path / '.235.config').write_text('Aho\n', encoding='utf-8')

    assert config.default_config_path() == tmp_path / '.235.config'
    assert config.read_highlights() == ['Aho']
