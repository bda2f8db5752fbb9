from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from api.dependencies import PhoneMapsLoader, get_maps_loader, get_tables, new_request_id
from api.schemas import ModesResponse, TransliterationRequest, TransliterationResponse
from cmu.dictionary import DictionaryUnavailableError, PhoneNotMappedError, WordNotFoundError
from common.config import get_settings
from core.pipeline import ConversionMode, transliterate
from kana.errors import KanaLookupError, SyllableLookupError
from kana.tables import KanaTables

LOGGER = logging.getLogger(__name__)
router = APIRouter()


@router.get("/modes", response_model=ModesResponse, summary="対応している変換モード")
def list_modes() -> ModesResponse:
    return ModesResponse(modes=list(ConversionMode))


@router.post(
    "/transliterate",
    response_model=TransliterationResponse,
    summary="ローマ字・かな・英単語を相互変換する",
)
def transliterate_text(
    payload: TransliterationRequest,
    tables: KanaTables = Depends(get_tables),  # noqa: B008
    load_maps: PhoneMapsLoader = Depends(get_maps_loader),  # noqa: B008
    req_id: str = Depends(new_request_id),  # noqa: B008
) -> TransliterationResponse:
    """テキストを指定モードで変換した結果を返す。"""

    settings = get_settings()
    if len(payload.text) > settings.max_text_chars:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail={"error": "text_too_long"},
        )

    try:
        maps = load_maps() if payload.mode.uses_dictionary else None
        result = transliterate(payload.text, payload.mode, tables=tables, maps=maps)
    except DictionaryUnavailableError as exc:
        LOGGER.error("req_id=%s dictionary_unavailable path=%s", req_id, exc.path)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail={"error": "dictionary_unavailable"},
        ) from exc
    except WordNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"error": "word_not_found", "word": exc.word},
        ) from exc
    except PhoneNotMappedError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"error": "phone_not_mapped", "phone": exc.phone},
        ) from exc
    except SyllableLookupError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"error": "syllable_lookup_failed", "token": exc.token},
        ) from exc
    except KanaLookupError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"error": "kana_lookup_failed", "char": exc.char},
        ) from exc

    LOGGER.info(
        "req_id=%s mode=%s chars=%d tokens=%d",
        req_id,
        payload.mode.value,
        len(payload.text),
        len(result.tokens),
    )
    return TransliterationResponse(
        mode=payload.mode,
        text=payload.text,
        tokens=result.tokens,
        output=result.text,
    )


__all__ = ["router"]
