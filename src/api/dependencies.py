"""FastAPI依存性の定義。"""
from __future__ import annotations

import uuid
from collections.abc import Callable

from cmu.dictionary import PhoneMaps, get_phone_maps
from common.config import get_settings
from kana.tables import KanaTables, get_kana_tables

PhoneMapsLoader = Callable[[], PhoneMaps]


def get_tables() -> KanaTables:
    """共有のかなテーブルを返す。"""

    return get_kana_tables()


def _load_configured_maps() -> PhoneMaps:
    return get_phone_maps(get_settings())


def get_maps_loader() -> PhoneMapsLoader:
    """CMU辞書の読み込み関数を返す。辞書はcmu_*モードでのみ読む。"""

    return _load_configured_maps


def new_request_id() -> str:
    """リクエスト識別子を生成する。"""

    return uuid.uuid4().hex
