"""In-process hand-off of one domain's events to another domain's handler.

Under ``event_processing = "sync"`` every domain keeps its own inline broker
and memory event store, and no Engine runs. Nothing then carries Menu's
coffee item events over to Ordering's ``MenuPriceEventHandler``. An
``EventRelay`` closes that gap around a unit of work in the source domain:
it notes the head of the source stream, lets the work run, and replays every
message stored since then through the target handler inside the target's
domain context.

With async processing the Engine subscribes to the shared message store
instead, so the relay steps aside.
"""

from collections.abc import Iterator
from contextlib import contextmanager

from protean.domain import Domain
from protean.utils import Processing

from shared.logging import get_logger

logger = get_logger(__name__)


class EventRelay:
    def __init__(self, source: Domain, target: Domain, stream_category: str, handler_cls: type) -> None:
        self.source = source
        self.target = target
        self.stream_category = stream_category
        self.handler_cls = handler_cls

    @property
    def active(self) -> bool:
        """True when both domains dispatch in-process and the Engine is not running."""
        return all(
            domain.config["event_processing"] == Processing.SYNC.value for domain in (self.source, self.target)
        )

    def head(self) -> int:
        """Global position of the newest message in the source stream, ``-1`` when empty."""
        with self.source.domain_context():
            return self.source.event_store.store.stream_head_position(self.stream_category)

    def deliver_since(self, position: int) -> int:
        """Replay source messages stored after ``position``. Returns how many were handled."""
        with self.source.domain_context():
            messages = self.source.event_store.store.read(self.stream_category, position=position + 1)

        # Only the message types the handler subscribes to; the rest of the
        # stream (detail edits, say) means nothing to the target.
        wanted = [message for message in messages if message.metadata.headers.type in self.handler_cls._handlers]

        with self.target.domain_context():
            for message in wanted:
                try:
                    self.handler_cls._handle(message)
                except Exception:
                    # The source change is already committed; log and move on, as the Engine does.
                    logger.exception(
                        "Relayed event failed in target handler",
                        target=self.target.name,
                        handler=self.handler_cls.__name__,
                        message_type=message.metadata.headers.type,
                    )

        if wanted:
            logger.debug(
                "Relayed events",
                source=self.source.name,
                target=self.target.name,
                count=len(wanted),
            )
        return len(wanted)

    @contextmanager
    def watch(self) -> Iterator[None]:
        """Relay whatever the enclosed block stores in the source stream."""
        if not self.active:
            yield
            return

        position = self.head()
        yield
        self.deliver_since(position)
