from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

import requests

from .api.connection import ApiConfig, ApiConnection
from .common.datetime_utils import get_zone
from .core.enums import RecordKind
from .presensi.viewmodel import RecordListViewModel
from .records.api_record_fetcher import ApiRecordFetcher
from .session.json_token_storage import JsonFileTokenStorage
from .session.provider import SessionTokenProvider
from .session.repository import TokenStorage


@dataclass(frozen=True)
class Container:
    conn: ApiConnection

    token_storage: TokenStorage
    token_provider: SessionTokenProvider

    attendance_fetcher: ApiRecordFetcher
    permit_fetcher: ApiRecordFetcher

    attendance_list: RecordListViewModel
    permit_list: RecordListViewModel

    def list_for(self, kind: RecordKind) -> RecordListViewModel:
        return self.attendance_list if kind is RecordKind.ATTENDANCE else self.permit_list


def build_container(
    *,
    api_config: dict,
    token_store_path: str,
    timezone: Optional[str] = None,
    token_storage: Optional[TokenStorage] = None,
    http_session: Optional[requests.Session] = None,
    clock: Optional[Callable[[], datetime]] = None,
) -> Container:
    config = ApiConfig.from_dict(api_config)
    conn = ApiConnection(config, session=http_session)
    tz = get_zone(timezone)

    storage = token_storage or JsonFileTokenStorage(token_store_path)
    token_provider = SessionTokenProvider(storage)

    attendance_fetcher = ApiRecordFetcher(conn, RecordKind.ATTENDANCE)
    permit_fetcher = ApiRecordFetcher(conn, RecordKind.PERMIT)

    attendance_list = RecordListViewModel(
        token_provider, attendance_fetcher, tz=tz, clock=clock, image_base_url=conn.base_url
    )
    permit_list = RecordListViewModel(
        token_provider, permit_fetcher, tz=tz, clock=clock, image_base_url=conn.base_url
    )

    return Container(
        conn=conn,
        token_storage=storage,
        token_provider=token_provider,
        attendance_fetcher=attendance_fetcher,
        permit_fetcher=permit_fetcher,
        attendance_list=attendance_list,
        permit_list=permit_list,
    )
