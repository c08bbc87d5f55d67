from __future__ import annotations

import asyncio
import logging
from datetime import date, datetime, tzinfo
from typing import Callable, Optional

from ..common import formatting
from ..common.datetime_utils import now_local
from ..core.enums import DateBucket, LoadState, RecordKind
from ..records.model import FetchResult, Record
from ..records.repository import RecordFetcher
from ..session.provider import SessionTokenProvider
from .filters import compute_visible

logger = logging.getLogger(__name__)


class RecordListViewModel:
    """State behind one record list screen (attendances or permits).

    Owns the record set; the presentation layer only reads ``visible`` and the
    flags. ``load``/``refresh`` never raise on fetch problems: the list ends up
    empty and the user can pull to refresh again.

    Not thread-safe: drive an instance from one event loop at a time. The
    in-flight fetch is an asyncio.Task and is cancelled from that loop only.
    """

    def __init__(
        self,
        tokens: SessionTokenProvider,
        fetcher: RecordFetcher,
        *,
        tz: tzinfo,
        clock: Optional[Callable[[], datetime]] = None,
        image_base_url: str = "",
    ):
        self._tokens = tokens
        self._fetcher = fetcher
        self._tz = tz
        self._clock = clock or (lambda: now_local(tz))
        self._image_base_url = image_base_url

        self._records: list[Record] = []
        self._merged: set[Record] = set()
        self._inflight: Optional[asyncio.Task] = None

        self.loading = False
        self.refreshing = False
        self.active_filter = DateBucket.ALL
        self.search_query = ""
        self.state = LoadState.IDLE
        self._settled_state = LoadState.IDLE

    @property
    def kind(self) -> RecordKind:
        return self._fetcher.kind

    @property
    def records(self) -> tuple[Record, ...]:
        return tuple(self._records)

    def today(self) -> date:
        return self._clock().astimezone(self._tz).date()

    async def load(self) -> None:
        self.loading = True
        self.state = LoadState.LOADING
        await self._run()

    async def refresh(self) -> None:
        self.refreshing = True
        self.state = LoadState.REFRESHING
        await self._run()

    def set_search(self, text: str) -> None:
        self.search_query = text or ""

    def set_filter(self, bucket: DateBucket | str) -> None:
        self.active_filter = bucket if isinstance(bucket, DateBucket) else DateBucket.parse(bucket)

    def merge_injected(self, record: Record) -> bool:
        """Prepend a record created elsewhere. Each value merges at most once."""
        if record in self._merged:
            logger.debug("Injected %s record already merged, skipping", record.kind.value)
            return False
        self._merged.add(record)
        self._records.insert(0, record)
        return True

    def cancel(self) -> None:
        task = self._inflight
        if task is None or task.done():
            return
        logger.info("Cancelling in-flight %s fetch", self.kind.value)
        self._inflight = None
        task.cancel()
        self._finish(self._settled_state)

    @property
    def visible(self) -> list[Record]:
        return compute_visible(
            self._records,
            query=self.search_query,
            bucket=self.active_filter,
            today=self.today(),
            tz=self._tz,
        )

    def visible_cards(self) -> list[dict]:
        return [self._to_card(r) for r in self.visible]

    def snapshot(self) -> dict:
        return {
            "kind": self.kind.value,
            "items": self.visible_cards(),
            "loading": self.loading,
            "refreshing": self.refreshing,
            "filter": self.active_filter.value,
            "search": self.search_query,
            "state": self.state.value,
        }

    async def _run(self) -> None:
        previous = self._inflight
        if previous is not None and not previous.done():
            logger.debug("Superseding in-flight %s fetch", self.kind.value)
            previous.cancel()

        task = asyncio.ensure_future(self._retrieve())
        self._inflight = task
        try:
            outcome = await task
        except asyncio.CancelledError:
            if self._inflight is not task:
                # superseded or cancel(); whoever replaced us settles the state
                return
            self._inflight = None
            self._finish(self._settled_state)
            raise
        except Exception:
            logger.exception("Unexpected error while fetching %s", self.kind.value)
            outcome = FetchResult.failure("unexpected error")

        if self._inflight is not task:
            return
        self._inflight = None
        self._apply(outcome)

    async def _retrieve(self) -> FetchResult:
        token = await self._tokens.get_token()
        if not token:
            logger.info("No token found, skipping %s fetch", self.kind.value)
            return FetchResult.unauthenticated()
        return await self._fetcher.fetch(token)

    def _apply(self, outcome: FetchResult) -> None:
        if outcome.ok:
            self._records = list(outcome.records)
            # an injected value the server did not return can be injected again
            self._merged &= set(self._records)
            self._finish(LoadState.LOADED)
        else:
            self._records = []
            self._merged.clear()
            self._finish(LoadState.LOAD_FAILED)

    def _finish(self, state: LoadState) -> None:
        self.loading = False
        self.refreshing = False
        self.state = state
        self._settled_state = state

    def _to_card(self, r: Record) -> dict:
        tz = self._tz
        card = {
            "day": formatting.format_day_abbreviation(r.start_date, tz),
            "time": formatting.format_time(r.start_date, tz),
            "date": formatting.format_date(r.start_date, tz),
            "title": r.class_name or "",
            "class_type": r.class_type or "",
            "name": formatting.capitalize_words(formatting.truncate_words(r.name, 2)),
            "status": r.status or "",
            "record": r.to_payload(),
        }
        if r.kind is RecordKind.PERMIT:
            card["status"] = formatting.approval_label(r.approval)
            card["status_color"] = formatting.approval_color(r.approval)
            card["description"] = r.description or ""
            card["image_url"] = formatting.resolve_image_url(self._image_base_url, r.img_url)
        else:
            card["attend_time"] = formatting.format_time(r.attend_at, tz)
        return card
