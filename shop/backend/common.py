import asyncio
import weakref
from shop.data_store import find_customer, load_data, new_customer, upsert_customer
from shop.session import ShopSession

# one storefront session per process, like the single page it serves
session = ShopSession()

# asyncio.Lock is tied to the loop it first waits on, so keep one per running loop
_submit_locks = weakref.WeakKeyDictionary()


def submit_lock():
    """Serializes login/register passes: at most one validation in flight per server."""
    loop = asyncio.get_running_loop()
    lock = _submit_locks.get(loop)
    if lock is None:
        lock = _submit_locks[loop] = asyncio.Lock()
    return lock


__all__ = ["load_data", "new_customer", "upsert_customer", "find_customer", "session", "submit_lock"]
