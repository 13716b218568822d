import threading

from warpish.resources import ResourceCache


def test_resource_cache():
    cache = ResourceCache()
    cache.set("key1", "value1")
    assert cache.get("key1") == "value1"
    assert cache.get("key2") is None
    cache.clear()
    assert cache.get("key1") is None


def test_set_overwrites_existing_value():
    cache = ResourceCache()
    cache.set("k", 1)
    cache.set("k", 2)
    assert cache.get("k") == 2


def test_concurrent_sets_are_all_kept():
    cache = ResourceCache()

    def fill(offset):
        for n in range(100):
            cache.set(offset + n, n)

    threads = [threading.Thread(target=fill, args=(i * 100,)) for i in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert all(cache.get(i * 100 + 99) == 99 for i in range(4))
    assert cache.get(0) == 0