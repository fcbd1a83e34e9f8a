from prometheus_client import REGISTRY

from pollers.config import PollerConfig, load_poller_config
from pollers.metrics import publish_poller_config


def _interval(poller: str):
    return REGISTRY.get_sample_value("poller_interval_ms", {"poller": poller})


def test_publish_poller_config():
    publish_poller_config(PollerConfig.from_raw("60000, 10000"))

    assert REGISTRY.get_sample_value("pollers_configured") == 2
    assert _interval("0") == 60000
    assert _interval("1") == 10000


def test_publish_fallback_config():
    publish_poller_config(PollerConfig.from_raw("30000, abc"))

    assert REGISTRY.get_sample_value("pollers_configured") == 1
    assert _interval("0") == 60000
    assert _interval("1") is None


def test_republish_after_reload_replaces_samples():
    publish_poller_config(load_poller_config("60000, 10000"))
    publish_poller_config(load_poller_config("15000"))

    assert REGISTRY.get_sample_value("pollers_configured") == 1
    assert _interval("0") == 15000
    assert _interval("1") is None  # stale poller gone

    publish_poller_config(load_poller_config("15000, 5000"))
    assert REGISTRY.get_sample_value("pollers_configured") == 2
    assert _interval("1") == 5000


def main() -> None:
    test_publish_poller_config()
    test_publish_fallback_config()
    test_republish_after_reload_replaces_samples()
    print("ok")


if __name__ == "__main__":
    main()
