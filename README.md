# xdscache

In-memory caches for the route and secret resources that an xDS-style control
plane serves to its proxies. Each cache holds the current set of resources.
It answers queries by name and tells waiting consumers when its contents
change. Every method takes a lock, so the caches can be shared between threads.

## Installation

```
pip install xdscache
```

## Route cache

`xdscache.routecache.RouteCache` holds `RouteConfiguration` objects keyed by
name. A `RouteConfiguration` is a dataclass with a `name` and a list of
`virtual_hosts`. The list is empty by default.

```python
from xdscache.routecache import RouteCache, RouteConfiguration

cache = RouteCache()
cache.update({
    "ingress_http": RouteConfiguration(name="ingress_http"),
    "ingress_https": RouteConfiguration(name="ingress_https"),
})

cache.contents()                 # every configuration, sorted by name
cache.query(["stats-handler", "ingress_http"])
# [RouteConfiguration(name='ingress_http', ...),
#  RouteConfiguration(name='stats-handler', virtual_hosts=[])]
```

- `update(values)` replaces the whole contents with the given mapping. Passing
  `None` empties the cache.
- `contents()` returns every cached configuration, sorted by name.
- `query(names)` returns one configuration for each name asked for, sorted by
  name. If a name has no entry, you get an empty `RouteConfiguration` with that
  name.
- `type_url()` returns
  `"type.googleapis.com/envoy.api.v2.RouteConfiguration"`. The module also
  exposes this string as `ROUTE_TYPE_URL`.

## Secret cache

`xdscache.secretcache.SecretCache` holds `Secret` objects keyed by name. A
`Secret` is a dataclass with a `name` and two optional byte fields,
`certificate_chain` and `private_key`.

`SecretCache` has the same methods as `RouteCache`, with one difference:
`query(names)` returns only the secrets that are known. It leaves out any name
that has no entry.

`type_url()` returns `"type.googleapis.com/envoy.api.v2.auth.Secret"`. The
module also exposes this string as `SECRET_TYPE_URL`.

## Waiting for changes

Each cache counts how many times `update` has been called. To wait for a
change, a consumer registers a channel together with the last count it saw.
The channel can be any object with a `put_nowait` method, for example a
`queue.Queue`.

- If the cache's count is already past that value, the channel receives the
  current count at once.
- Otherwise the channel is kept as a waiter. The next `update` sends the new
  count to every waiter and then forgets them all, so a consumer registers
  again after each notification.

The cache never blocks on a send. Each channel must therefore have room for at
least one item.

```python
import queue

ch = queue.Queue(maxsize=1)
last = 0
while True:
    cache.register(ch, last)
    last = ch.get()              # waits until the count moves past `last`
    resources = cache.contents()
```

## What this package does not do

The package only holds resources that you put into it. It does not build route
configurations or secrets from any other source. It does not serve them over
gRPC or any other protocol. The entries in `virtual_hosts` are stored as given
and are never checked.

## Running the tests

```
pip install -e ".[test]"
pytest
```