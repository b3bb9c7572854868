"""
MapConfiguration - storage behaviour, list values and bulk operations.
"""
import pytest
from collections import OrderedDict

from confstore.core.config import StoreSettings
from confstore.core.configuration import MapConfiguration, split_list
from confstore.core.events import Events
from confstore.core.exceptions import ConfigurationError, InvalidKeyError


class TestSplitList:

    def test_split_and_strip(self):
        assert split_list("a, b ,c", ",") == ["a", "b", "c"]

    def test_escaped_delimiter(self):
        assert split_list("a\\,b, c", ",") == ["a,b", "c"]

    def test_other_escapes_kept(self):
        assert split_list("c:\\temp;d", ";") == ["c:\\temp", "d"]

    def test_no_delimiter(self):
        assert split_list("single", ",") == ["single"]


class TestMapConfigurationStorage:

    @pytest.fixture
    def config(self):
        return MapConfiguration()

    def test_uses_given_mapping(self):
        store = OrderedDict(existing="value")
        config = MapConfiguration(store)

        config.add_property("new", 1)

        assert config.store is store
        assert list(store) == ["existing", "new"]

    def test_add_accumulates_values(self, config):
        config.add_property("hosts", "a")
        config.add_property("hosts", "b")

        assert config.get_property("hosts") == ["a", "b"]

    def test_add_splits_delimited_string(self, config):
        config.add_property("hosts", "a, b, c")

        assert config.get_property("hosts") == ["a", "b", "c"]

    def test_add_sequence(self, config):
        config.add_property("ports", (80, None, 443))

        assert config.get_property("ports") == [80, 443]

    def test_add_none_adds_nothing(self, config):
        config.add_property("key", None)

        assert not config.contains_key("key")

    def test_delimiter_parsing_disabled(self):
        config = MapConfiguration(settings=StoreSettings(delimiter_parsing_disabled=True))

        config.add_property("csv", "a,b")

        assert config.get_property("csv") == "a,b"

    def test_custom_delimiter(self):
        config = MapConfiguration(settings=StoreSettings(list_delimiter=";"))

        config.add_property("paths", "/usr;/opt, x")

        assert config.get_property("paths") == ["/usr", "/opt, x"]

    def test_set_replaces_values(self, config):
        config.add_property("hosts", "a, b")
        config.set_property("hosts", "c")

        assert config.get_property("hosts") == "c"

    def test_set_none_removes_key(self, config):
        config.add_property("key", 1)
        config.set_property("key", None)

        assert "key" not in config

    def test_clear_property_missing_key(self, config, make_listener):
        listener = make_listener(config)
        config.add_event_listener(Events.ANY, listener)

        config.clear_property("missing")

        listener.check_event(Events.CLEAR_PROPERTY, "missing", None, True)
        listener.check_event(Events.CLEAR_PROPERTY, "missing", None, False)
        listener.done()

    def test_reads(self, config):
        config.add_property("db.host", "localhost")
        config.add_property("db.port", 5432)
        config.add_property("dbx", True)

        assert config.get("db.user", "admin") == "admin"
        assert config.get("db.port") == 5432
        assert config.get_keys() == ["db.host", "db.port", "dbx"]
        assert config.get_keys("db") == ["db.host", "db.port"]
        assert len(config) == 3
        assert "db.host" in config
        assert 42 not in config

    @pytest.mark.parametrize("key", ["", None, 5])
    def test_invalid_key_rejected_before_events(self, config, key):
        fired = []
        config.add_event_listener(Events.ANY, fired.append)

        with pytest.raises(InvalidKeyError):
            config.add_property(key, "value")

        assert fired == []

    def test_invalid_key_is_value_error(self):
        assert issubclass(InvalidKeyError, ValueError)
        assert issubclass(InvalidKeyError, ConfigurationError)

    def test_detail_events_from_settings(self):
        config = MapConfiguration(settings=StoreSettings(detail_events=True))

        assert config.is_detail_events()


class TestMapConfigurationDetailEvents:

    @pytest.fixture
    def config(self, make_listener):
        config = MapConfiguration()
        config.add_property("key", "old")
        config.listener = make_listener(config)
        config.add_event_listener(Events.ANY, config.listener)
        config.set_detail_events(True)
        return config

    def test_add_list_fires_detail_per_value(self, config):
        config.add_property("hosts", "a, b")

        events = config.listener.events
        assert len(events) == 6
        assert [e.property_value for e in events[1:5]] == ["a", "a", "b", "b"]

    def test_set_decomposes_into_clear_and_add(self, config):
        config.set_property("key", "new")

        types = [(e.event_type, e.before_update) for e in config.listener.events]
        assert types == [
            (Events.SET_PROPERTY, True),
            (Events.CLEAR_PROPERTY, True),
            (Events.CLEAR_PROPERTY, False),
            (Events.ADD_PROPERTY, True),
            (Events.ADD_PROPERTY, False),
            (Events.SET_PROPERTY, False),
        ]

    def test_clear_fires_clear_property_per_key(self, config):
        config.add_property("other", 1)
        config.listener.events.clear()

        config.clear()

        cleared = [e.property_name for e in config.listener.events
                   if e.event_type == Events.CLEAR_PROPERTY and e.before_update]
        assert cleared == ["key", "other"]
        assert config.is_empty()

    def test_no_detail_events_when_disabled(self, config):
        config.set_detail_events(False)

        config.set_property("key", "new")

        assert len(config.listener.events) == 2


class TestBulkOperations:

    def test_copy_from_configuration(self, make_listener):
        source = MapConfiguration()
        source.add_property("a", "1, 2")
        source.add_property("b", "x")
        target = MapConfiguration({"b": "old"})
        listener = make_listener(target)
        target.add_event_listener(Events.SET_PROPERTY, listener)

        target.copy(source)

        assert target.get_property("a") == ["1", "2"]
        assert target.get_property("b") == "x"
        listener.check_event(Events.SET_PROPERTY, "a", ["1", "2"], True)
        listener.check_event(Events.SET_PROPERTY, "a", ["1", "2"], False)
        listener.check_event(Events.SET_PROPERTY, "b", "x", True)
        listener.check_event(Events.SET_PROPERTY, "b", "x", False)
        listener.done()

    def test_copy_keeps_escaped_strings_whole(self):
        target = MapConfiguration()

        target.copy({"csv": "a,b"})

        assert target.get_property("csv") == "a,b"

    def test_append_from_mapping(self):
        target = MapConfiguration({"a": "1"})

        target.append({"a": "2", "b": "3"})

        assert target.get_property("a") == ["1", "2"]
        assert target.get_property("b") == "3"
