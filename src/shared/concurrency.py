"""Running blocking domain work from async route handlers."""

from fastapi.concurrency import run_in_threadpool


async def run_in_domain(domain, fn, *args, **kwargs):
    """Run ``fn`` on the threadpool with ``domain``'s context pushed.

    Used by handlers whose work calls sibling services over HTTP, so that a
    slow (or self-hosted) sibling never blocks the event loop.
    """

    def call():
        with domain.domain_context():
            return fn(*args, **kwargs)

    return await run_in_threadpool(call)
