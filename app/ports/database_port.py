from abc import ABC, abstractmethod

from app.ports.blog_port import BlogPort


class DatabasePort(BlogPort, ABC):
    """
    Aggregate port for operations against the data store.
    Inherits from domain-specific ports to strictly follow ISP.
    """

    # ── Maintenance (seed / teardown only, never used by routes) ──

    @abstractmethod
    async def drop_all(self) -> None:
        """Remove every blog post."""
        ...
