import asyncio
from typing import Callable, TypeVar

T = TypeVar("T")


async def run_blocking(func: Callable[..., T], *args, **kwargs) -> T:
    """Run a blocking call (boto3 request) in the default executor.

    Central helper so request handlers never block the event loop on the
    synchronous AWS clients, and so independent fetches can be awaited
    together with asyncio.gather.
    """
    return await asyncio.to_thread(func, *args, **kwargs)
