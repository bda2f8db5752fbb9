"""FastAPIアプリケーションのエントリポイント。"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from api.routes import router
from kana.tables import get_kana_tables

LOGGER = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    """起動時にかなテーブルを構築しておく。"""

    tables = get_kana_tables()
    LOGGER.info(
        "startup hiragana=%d katakana=%d",
        len(tables.hiragana.kana),
        len(tables.katakana.kana),
    )
    yield


app = FastAPI(title="Kana Transliteration API", version="0.1.0", lifespan=lifespan)
app.include_router(router)


@app.get("/healthz", summary="ヘルスチェック")
def healthz() -> dict[str, str]:
    """バックエンドの状態を返す。"""

    return {"status": "ok"}
