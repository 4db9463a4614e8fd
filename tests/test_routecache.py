import queue

import pytest

from xdscache.routecache import RouteCache, RouteConfiguration


@pytest.mark.parametrize(
    "contents, want",
    [
        (None, []),
        (
            {
                "ingress_http": RouteConfiguration(name="ingress_http"),
                "ingress_https": RouteConfiguration(name="ingress_https"),
            },
            [
                RouteConfiguration(name="ingress_http"),
                RouteConfiguration(name="ingress_https"),
            ],
        ),
    ],
    ids=["empty", "simple"],
)
def test_route_cache_contents(contents, want):
    rc = RouteCache()
    rc.update(contents)
    assert rc.contents() == want


@pytest.mark.parametrize(
    "contents, names, want",
    [
        (
            {"ingress_http": RouteConfiguration(name="ingress_http")},
            ["ingress_http"],
            [RouteConfiguration(name="ingress_http")],
        ),
        (
            {"ingress_http": RouteConfiguration(name="ingress_http")},
            ["stats-handler", "ingress_http"],
            [
                RouteConfiguration(name="ingress_http"),
                RouteConfiguration(name="stats-handler"),
            ],
        ),
        (
            {"ingress_http": RouteConfiguration(name="ingress_http")},
            ["stats-handler"],
            [RouteConfiguration(name="stats-handler")],
        ),
    ],
    ids=["exact match", "partial match", "no match"],
)
def test_route_cache_query(contents, names, want):
    rc = RouteCache()
    rc.update(contents)
    assert rc.query(names) == want


def test_contents_sorted_by_name():
    rc = RouteCache()
    rc.update(
        {
            "ingress_https": RouteConfiguration(name="ingress_https"),
            "ingress_http": RouteConfiguration(name="ingress_http"),
        }
    )
    names = [r.name for r in rc.contents()]
    assert names == sorted(names)


def test_update_replaces_contents():
    rc = RouteCache()
    rc.update({"ingress_http": RouteConfiguration(name="ingress_http")})
    rc.update({"ingress_https": RouteConfiguration(name="ingress_https")})
    assert rc.contents() == [RouteConfiguration(name="ingress_https")]


def test_register_waits_for_update():
    rc = RouteCache()
    ch = queue.Queue(maxsize=1)
    rc.register(ch, 0)
    assert ch.empty()
    rc.update({})
    assert ch.get_nowait() == 1


def test_register_fires_immediately_when_behind():
    rc = RouteCache()
    rc.update({})
    rc.update({})
    ch = queue.Queue(maxsize=1)
    rc.register(ch, 0)
    assert ch.get_nowait() == 2


def test_waiters_are_notified_once():
    rc = RouteCache()
    ch = queue.Queue(maxsize=1)
    rc.register(ch, 0)
    rc.update({})
    assert ch.get_nowait() == 1
    rc.update({})
    assert ch.empty()


def test_type_url():
    assert RouteCache().type_url() == "type.googleapis.com/envoy.api.v2.RouteConfiguration"