"""Load/save orchestration between a TranslationStore and the storage client."""

import logging

from transedit.errors import SaveFailure
from transedit.services.client import TranslationsClient
from transedit.store.store import TranslationStore

logger = logging.getLogger(__name__)


async def load_store(client: TranslationsClient) -> TranslationStore:
    data = await client.fetch()
    return TranslationStore.load(data.translations, data.main_lang, all_keys=data.all_keys)


async def save_all(store: TranslationStore, client: TranslationsClient) -> int:
    """Persist every language. Returns the number of marks the save covered.

    Edits made while the request is in flight stay dirty.
    """
    request = store.begin_save()
    try:
        await client.save_all(request.payload["translations"])
    except SaveFailure:
        store.abort_save(request)
        raise
    store.commit_save(request)
    return len(request.snapshot)


async def save_key(store: TranslationStore, client: TranslationsClient, key: str) -> int:
    """Persist one key across all languages."""
    request = store.begin_save(key)
    try:
        await client.save_key(key, request.payload["values"])
    except SaveFailure:
        store.abort_save(request)
        raise
    store.commit_save(request)
    return len(request.snapshot)
