import streamlit as st


PREFIX = "slice"


def _store(store=None):
    return st.session_state if store is None else store


def slice_key(slice_name):
    return f"{PREFIX}.{slice_name}"


def get_slice(slice_name, store=None):
    store = _store(store)
    key = slice_key(slice_name)
    if key not in store:
        store[key] = {}
    return store[key]


def clear_slice(slice_name, store=None):
    store = _store(store)
    key = slice_key(slice_name)
    if key in store:
        del store[key]


def clear_prefixed(prefixes, store=None):
    store = _store(store)
    prefixes = tuple(prefixes)
    for key in [key for key in list(store.keys()) if str(key).startswith(prefixes)]:
        del store[key]


def clear_all_slices(store=None):
    clear_prefixed((f"{PREFIX}.",), store)
