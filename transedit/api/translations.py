"""Translations storage endpoints."""

import logging
from pathlib import Path

from fastapi import APIRouter, HTTPException

from transedit.config import settings
from transedit.errors import InvalidKey, InvalidSegment
from transedit.schemas.translations import (
    FullSaveRequest,
    KeySaveRequest,
    LoadResponse,
    SaveAck,
)
from transedit.services import storage
from transedit.store.store import TranslationStore
from transedit.utils.metrics import loads_total, save_failures_total, saves_total

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api")


def _translations_dir() -> Path:
    return Path(settings.translations_dir)


@router.get("/translations", response_model=LoadResponse, response_model_by_alias=True)
def get_translations() -> LoadResponse:
    try:
        translations = storage.read_all(_translations_dir())
        store = TranslationStore.load(translations, settings.main_language)
    except (InvalidKey, InvalidSegment, ValueError) as e:
        logger.exception("Stored translations are unreadable")
        raise HTTPException(status_code=500, detail=str(e)) from e

    loads_total.inc()
    return LoadResponse(
        translations=translations,
        all_keys=store.keys(),
        main_lang=settings.main_language,
    )


@router.post("/save", response_model=SaveAck)
def save_translations(body: FullSaveRequest) -> SaveAck:
    try:
        storage.write_all(_translations_dir(), body.translations)
    except (InvalidKey, InvalidSegment, storage.InvalidLanguage) as e:
        save_failures_total.labels(scope="full").inc()
        raise HTTPException(status_code=422, detail=str(e)) from e

    saves_total.labels(scope="full").inc()
    return SaveAck(languages=sorted(body.translations))


@router.post("/save-key", response_model=SaveAck)
def save_key(body: KeySaveRequest) -> SaveAck:
    try:
        storage.write_key(_translations_dir(), body.key, body.values)
    except (InvalidKey, InvalidSegment, storage.InvalidLanguage) as e:
        save_failures_total.labels(scope="key").inc()
        raise HTTPException(status_code=422, detail=str(e)) from e

    saves_total.labels(scope="key").inc()
    return SaveAck(languages=sorted(body.values))
