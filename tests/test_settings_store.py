import json
from dataclasses import replace
from pathlib import Path


def test_settings_defaults_load_when_missing(tmp_path: Path):
    from showdex_hydro.model import default_settings
    from showdex_hydro.storage import SettingsStore

    store = SettingsStore(home=tmp_path)
    assert store.read_raw() is None
    assert store.load() == default_settings()
    assert store.load(color_scheme="dark").color_scheme == "dark"


def test_settings_roundtrip_save_load(tmp_path: Path):
    from showdex_hydro.model import default_settings
    from showdex_hydro.storage import SETTINGS_STORAGE_KEY, SettingsStore

    store = SettingsStore(home=tmp_path)
    base = default_settings()
    settings = replace(base, color_scheme="dark", calcdex=replace(base.calcdex, open_as="overlay"))

    value = store.save(settings)

    assert store.read_raw() == value
    assert store.load() == settings

    data = json.loads(store.path().read_text(encoding="utf-8"))
    assert data[SETTINGS_STORAGE_KEY] == value


def test_settings_store_keeps_other_keys(tmp_path: Path):
    from showdex_hydro.model import default_settings
    from showdex_hydro.storage import SettingsStore

    store = SettingsStore(home=tmp_path)
    store.path().write_text(json.dumps({"other-extension": "keep me"}), encoding="utf-8")

    store.save(default_settings())
    store.clear()

    data = json.loads(store.path().read_text(encoding="utf-8"))
    assert data == {"other-extension": "keep me"}


def test_settings_corrupt_json_is_backed_up(tmp_path: Path):
    from showdex_hydro.model import default_settings
    from showdex_hydro.storage import SettingsStore

    store = SettingsStore(home=tmp_path)
    p = store.path()
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("{not valid json", encoding="utf-8")

    assert store.load() == default_settings()

    # A backup should exist
    baks = sorted(p.parent.glob(p.name + ".bak.*"))
    assert baks, "Expected a backup to be created for corrupt storage"


def test_settings_home_env_override(tmp_path: Path, monkeypatch):
    from showdex_hydro.storage import SettingsStore

    monkeypatch.setenv("SHOWDEX_HYDRO_HOME", str(tmp_path / "custom"))
    store = SettingsStore()
    assert store.path() == tmp_path / "custom" / "local_storage.json"


def test_settings_explicit_light_survives_dark_host(tmp_path: Path):
    from showdex_hydro.storage import SettingsStore

    store = SettingsStore(home=tmp_path)
    settings = replace(store.load(color_scheme="dark"), color_scheme="light")
    store.save(settings)

    assert store.load(color_scheme="dark").color_scheme == "light"
