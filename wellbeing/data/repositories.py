import logging

from wellbeing.constants import GRATITUDE_TABLE, MOOD_LOGS_TABLE, PROFILES_TABLE
from wellbeing.data import backend_client
from wellbeing.schemas import (
    GratitudeEntry,
    GratitudeEntryCreate,
    MoodLog,
    MoodLogCreate,
    Profile,
    ProfileUpdate,
)

logger = logging.getLogger(__name__)

_CLIENT_GETTER = None


def configure(client_getter):
    global _CLIENT_GETTER
    _CLIENT_GETTER = client_getter


def _client(client=None):
    if client is not None:
        return client
    if _CLIENT_GETTER is None:
        raise RuntimeError("repositories not configured")
    return _CLIENT_GETTER()


def resolve_client():
    return _client()


def _first(rows):
    if not rows:
        return None
    if isinstance(rows, list):
        return rows[0]
    return rows


# Profiles


def create_profile(user_id, username):
    payload = {"user_id": str(user_id), "username": username}
    rows = backend_client.execute(
        _client().table(PROFILES_TABLE).insert([payload]),
        action="create_profile",
    )
    logger.info("Created profile for user %s", user_id)
    row = _first(rows)
    return Profile.model_validate(row) if row else Profile.model_validate(payload)


def get_profile(user_id):
    rows = backend_client.execute(
        _client().table(PROFILES_TABLE).select("*").eq("user_id", str(user_id)).limit(1),
        action="get_profile",
    )
    row = _first(rows)
    return Profile.model_validate(row) if row else None


def update_profile(user_id, updates):
    patch = ProfileUpdate.model_validate(updates).model_dump(exclude_none=True)
    if not patch:
        raise ValueError("No changes provided")
    rows = backend_client.execute(
        _client().table(PROFILES_TABLE).update(patch).eq("user_id", str(user_id)),
        action="update_profile",
    )
    logger.info("Updated profile for user %s: %s", user_id, sorted(patch))
    row = _first(rows)
    return Profile.model_validate(row) if row else None


# Mood logs


def create_mood_log(rating, tags=None):
    payload = MoodLogCreate(rating=rating, tags=list(tags or []))
    client = _client()
    user_id = backend_client.current_user_id(client)
    rows = backend_client.execute(
        client.table(MOOD_LOGS_TABLE).insert(
            [{"user_id": user_id, "rating": payload.rating, "tags": payload.tags}]
        ),
        action="create_mood_log",
    )
    row = _first(rows)
    if not row:
        raise backend_client.BackendError("Mood log was not returned by the backend", action="create_mood_log")
    logger.info("Mood log created for user %s", user_id)
    return MoodLog.model_validate(row)


def list_mood_logs(user_id, limit=None, client=None):
    query = (
        _client(client)
        .table(MOOD_LOGS_TABLE)
        .select("*")
        .eq("user_id", str(user_id))
        .order("created_at", desc=True)
    )
    if limit:
        query = query.limit(int(limit))
    rows = backend_client.execute(query, action="list_mood_logs") or []
    return [MoodLog.model_validate(row) for row in rows]


def get_mood_log(log_id):
    rows = backend_client.execute(
        _client().table(MOOD_LOGS_TABLE).select("*").eq("id", str(log_id)).limit(1),
        action="get_mood_log",
    )
    row = _first(rows)
    return MoodLog.model_validate(row) if row else None


# Gratitude entries


def create_gratitude_entry(content):
    payload = GratitudeEntryCreate(content=content)
    client = _client()
    user_id = backend_client.current_user_id(client)
    rows = backend_client.execute(
        client.table(GRATITUDE_TABLE).insert([{"user_id": user_id, "content": payload.content}]),
        action="create_gratitude_entry",
    )
    row = _first(rows)
    if not row:
        raise backend_client.BackendError(
            "Gratitude entry was not returned by the backend",
            action="create_gratitude_entry",
        )
    logger.info("Gratitude entry created for user %s", user_id)
    return GratitudeEntry.model_validate(row)


def list_gratitude_entries(user_id, limit=None, client=None):
    query = (
        _client(client)
        .table(GRATITUDE_TABLE)
        .select("*")
        .eq("user_id", str(user_id))
        .order("created_at", desc=True)
    )
    if limit:
        query = query.limit(int(limit))
    rows = backend_client.execute(query, action="list_gratitude_entries") or []
    return [GratitudeEntry.model_validate(row) for row in rows]


def get_gratitude_entry(entry_id):
    rows = backend_client.execute(
        _client().table(GRATITUDE_TABLE).select("*").eq("id", str(entry_id)).limit(1),
        action="get_gratitude_entry",
    )
    row = _first(rows)
    return GratitudeEntry.model_validate(row) if row else None
