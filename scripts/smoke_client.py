import os
import sys
import json
import requests

BASE_URL = os.environ.get("SMOKE_URL") or os.environ.get("DEV_URL", "http://127.0.0.1:5002")
API = f"{BASE_URL.rstrip('/')}/api"

SAMPLE_FORM = {
    "case_id": "BRGY-2024-001",
    "complainant": {"name": "Juan Dela Cruz"},
    "respondents": [{"name": "Pedro Santos"}],
    "incident": {
        "summary": "Someone took my neighbor's carabao while I was sleeping",
        "location": "Purok 3, San Pedro City",
        "date_time": "2024-05-01T20:00",
    },
}

def get(path: str):
    r = requests.get(f"{API}{path}", timeout=10)
    r.raise_for_status()
    return r

def post(path: str, payload: dict):
    r = requests.post(f"{API}{path}", json=payload, timeout=20)
    r.raise_for_status()
    return r

def main():
    print(f"[smoke] Target: {API}")
    print("[smoke] /health:", get("/health").status_code)
    print("[smoke] /version:", get("/version").status_code)
    print("[smoke] /categories:", get("/categories").status_code)

    r = post("/report", SAMPLE_FORM)
    print("[smoke] /report:", r.status_code, r.json()["report"]["category"])

    try:
        r = post("/legal-search", {"query": "qualified theft carabao"})
        print("[smoke] /legal-search:", r.status_code, json.dumps(r.json(), indent=2)[:300])
    except requests.HTTPError as he:
        if he.response is not None and he.response.status_code == 503:
            print("[smoke] /legal-search not configured (503)")
        else:
            raise

if __name__ == "__main__":
    try:
        main()
    except Exception as e:
        print("[smoke] FAILED:", e)
        sys.exit(1)
