import os
import requests

API_BASE = os.getenv("LIBURKU_API_BASE", "http://127.0.0.1:8000").rstrip("/")
API_TIMEOUT = float(os.getenv("LIBURKU_API_TIMEOUT", "15"))

_session = requests.Session()

def api_get(path, **kwargs):
    # backend sendiri menunggu dayoffapi, jadi jangan biarkan UI menggantung
    kwargs.setdefault("timeout", API_TIMEOUT)
    return _session.get(f"{API_BASE}{path}", **kwargs)
