import logging
import sqlite3
import threading

import pytest

from autorefresh.core.config import settings
from autorefresh.core.properties import AUTO_REFRESH_SECONDS, SystemProperties
from autorefresh.extensions import base
from autorefresh.extensions.config_auto_refresh import ConfigAutoRefresh


@pytest.fixture
def db(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "DB_PATH", str(tmp_path / "test.db"))
    return tmp_path / "test.db"


@pytest.fixture
def save_calls(monkeypatch):
    calls = []
    real_save = base.save_extension_state

    def counting_save(conn, component, state):
        calls.append((component, dict(state)))
        return real_save(conn, component, state)

    monkeypatch.setattr(base, "save_extension_state", counting_save)
    return calls


def test_fresh_instance_uses_default(db):
    ext = ConfigAutoRefresh(properties=SystemProperties())
    assert ext.get_refresh_rate() == 10


def test_initialize_without_stored_state_publishes_default(db):
    props = SystemProperties()
    ext = ConfigAutoRefresh(properties=props)
    ext.initialize()

    assert ext.get_refresh_rate() == 10
    assert props.get_property(AUTO_REFRESH_SECONDS) == "10"


@pytest.mark.parametrize("value", [1, 30, 3600, 0, -1, -300])
def test_set_then_get_accepts_any_integer(db, value):
    props = SystemProperties()
    ext = ConfigAutoRefresh(properties=props)
    ext.set_refresh_rate(value)

    assert ext.get_refresh_rate() == value
    assert props.get_property(AUTO_REFRESH_SECONDS) == str(value)


def test_each_update_writes_once(db, save_calls):
    ext = ConfigAutoRefresh(properties=SystemProperties())
    ext.set_refresh_rate(15)
    assert len(save_calls) == 1
    ext.set_refresh_rate(20)
    assert len(save_calls) == 2
    assert save_calls[-1] == (ext.component_id, {"refresh_rate": 20})


def test_configure_binds_form_and_writes_once(db, save_calls):
    props = SystemProperties()
    ext = ConfigAutoRefresh(properties=props)

    assert ext.configure({"refreshRate": "45"}) is True
    assert ext.get_refresh_rate() == 45
    assert props.get_property(AUTO_REFRESH_SECONDS) == "45"
    assert len(save_calls) == 1

    assert ext.configure({"refresh_rate": 5}) is True
    assert ext.get_refresh_rate() == 5


def test_configure_without_field_reports_success_and_keeps_value(db, save_calls):
    ext = ConfigAutoRefresh(properties=SystemProperties())
    assert ext.configure({}) is True
    assert ext.get_refresh_rate() == 10
    assert save_calls == []


def test_value_survives_restart(db):
    props = SystemProperties()
    ext = ConfigAutoRefresh(properties=props)
    ext.initialize()
    assert ext.get_refresh_rate() == 10

    ext.set_refresh_rate(30)
    assert ext.get_refresh_rate() == 30
    assert props.get_property(AUTO_REFRESH_SECONDS) == "30"

    # simulate a process restart: new property context, new instance
    restarted_props = SystemProperties()
    restarted = ConfigAutoRefresh(properties=restarted_props)
    restarted.initialize()
    assert restarted.get_refresh_rate() == 30
    assert restarted_props.get_property(AUTO_REFRESH_SECONDS) == "30"


def test_load_overwrites_stale_property(db):
    ConfigAutoRefresh(properties=SystemProperties()).set_refresh_rate(12)

    props = SystemProperties({AUTO_REFRESH_SECONDS: "999"})
    ConfigAutoRefresh(properties=props).initialize()
    assert props.get_property(AUTO_REFRESH_SECONDS) == "12"


def test_persistence_errors_propagate(db):
    def broken_connection():
        raise sqlite3.OperationalError("unable to open database file")

    ext = ConfigAutoRefresh(properties=SystemProperties(), connection_factory=broken_connection)
    with pytest.raises(sqlite3.OperationalError):
        ext.set_refresh_rate(20)
    with pytest.raises(sqlite3.OperationalError):
        ext.initialize()


def test_concurrent_updates_leave_mirror_and_store_consistent(db):
    props = SystemProperties()
    ext = ConfigAutoRefresh(properties=props)

    threads = [threading.Thread(target=ext.set_refresh_rate, args=(v,)) for v in range(1, 9)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    final = ext.get_refresh_rate()
    assert props.get_property(AUTO_REFRESH_SECONDS) == str(final)

    reloaded = ConfigAutoRefresh(properties=SystemProperties())
    reloaded.initialize()
    assert reloaded.get_refresh_rate() == final


def test_display_name(db):
    ext = ConfigAutoRefresh(properties=SystemProperties())
    assert ext.get_display_name() == "Config AutoRefresh"


def test_configure_rejects_boolean_without_saving(db, save_calls):
    props = SystemProperties()
    ext = ConfigAutoRefresh(properties=props)
    with pytest.raises(TypeError):
        ext.configure({"refreshRate": True})
    assert ext.get_refresh_rate() == 10
    assert props.get_property(AUTO_REFRESH_SECONDS) is None
    assert save_calls == []


def test_update_logs_stored_integer(db, caplog):
    ext = ConfigAutoRefresh(properties=SystemProperties())
    with caplog.at_level(logging.INFO, logger="autorefresh.extensions.config_auto_refresh"):
        ext.configure({"refreshRate": "45"})

    messages = [r.getMessage() for r in caplog.records]
    assert "Auto-refresh rate set to 45 seconds" in messages
    assert all(r.args == (45,) for r in caplog.records if r.getMessage().startswith("Auto-refresh rate set"))
