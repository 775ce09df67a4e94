#!/usr/bin/env python3
"""Smoke check for the advisor session endpoints against a running server."""

import sys

import httpx


BASE_URL = "http://127.0.0.1:8001"

WALKTHROUGH = [
    ("privacy", "accept"),
    ("welcome", "continue"),
    ("mode", "digital_and_print"),
    ("event", "Hochzeit"),
    ("guests", "50–120"),
    ("format", "strip"),
    ("printpkgs", "100"),
    ("accessories", "yes"),
    ("accessories", "yes"),
    ("accessories", "no"),
    ("accessories", "no"),
    ("accessories", "no"),
]


def run_walkthrough() -> str | None:
    """Create a session and answer every step."""
    print("=" * 60)
    print("Testing POST /api/v1/sessions and /choose")
    print("=" * 60)

    try:
        response = httpx.post(f"{BASE_URL}/api/v1/sessions", timeout=10.0)
        response.raise_for_status()
        session_id = response.json()["session_id"]
        print(f"✅ Session: {session_id}")

        for step_id, value in WALKTHROUGH:
            response = httpx.post(
                f"{BASE_URL}/api/v1/sessions/{session_id}/choose",
                json={"step_id": step_id, "value": value},
                timeout=10.0,
            )
            response.raise_for_status()
            step = response.json()["step"]
            print(f"  {step_id}={value} -> {step['id']} [{step['position']}/{step['total']}]")

        return session_id
    except httpx.HTTPStatusError as e:
        print(f"❌ HTTP Error: {e.response.status_code}")
        print(f"Response: {e.response.text}")
        return None
    except httpx.HTTPError as e:
        print(f"❌ Error: {e}")
        return None


def show_summary(session_id: str) -> bool:
    """Fetch the summary text for a finished session."""
    print("\n" + "=" * 60)
    print("Testing GET /api/v1/sessions/{id}/summary")
    print("=" * 60)

    try:
        response = httpx.get(f"{BASE_URL}/api/v1/sessions/{session_id}/summary", timeout=10.0)
        response.raise_for_status()
        data = response.json()
        print(data["selection"])
        print()
        print(data["prices"])
        return True
    except httpx.HTTPStatusError as e:
        print(f"❌ HTTP Error: {e.response.status_code}")
        print(f"Response: {e.response.text}")
        return False


def main():
    print("\n🚀 Testing Advisor API\n")

    try:
        httpx.get(f"{BASE_URL}/health", timeout=5.0)
        print("✅ Server is running\n")
    except httpx.HTTPError:
        print("❌ Server is not running!")
        print("   Please start it with: uvicorn fotobox_advisor.main:app --reload --port 8001")
        sys.exit(1)

    session_id = run_walkthrough()
    if session_id:
        show_summary(session_id)

    print("\n" + "=" * 60)
    print("✅ Smoke check complete!")
    print("=" * 60 + "\n")


if __name__ == "__main__":
    main()
