"""Interactive CLI client for the widget endpoints."""

from __future__ import annotations

import argparse
from pathlib import Path

import requests


def _choose(prompt: str, options: list[dict], key: str = "code") -> str:
    for index, option in enumerate(options, start=1):
        print(f"  {index}. {option['label']}")
    raw = input(f"{prompt} (number, blank to skip): ").strip()
    if not raw:
        return ""
    if raw.isdigit() and 1 <= int(raw) <= len(options):
        return options[int(raw) - 1][key]
    return raw


def main() -> int:
    parser = argparse.ArgumentParser(description="Interactive guided-prompt CLI")
    parser.add_argument("--url", default="http://127.0.0.1:8000", help="Server base URL")
    parser.add_argument("--widget", default="lesson-planner", help="Widget kind")
    parser.add_argument("--model", default=None, help="Model selection id, e.g. chat-model-reasoning")
    parser.add_argument("--file", type=Path, default=None, help="Student text file to upload")
    parser.add_argument("--timeout", type=int, default=120, help="Request timeout in seconds")
    args = parser.parse_args()

    widgets = requests.get(f"{args.url}/widgets", timeout=args.timeout).json()
    widget = next((w for w in widgets if w["kind"] == args.widget), None)
    if widget is None:
        print(f"Unknown widget {args.widget!r}. Available: {', '.join(w['kind'] for w in widgets)}")
        return 1

    session_id = requests.post(f"{args.url}/sessions", timeout=args.timeout).json()["session_id"]
    base = f"{args.url}/sessions/{session_id}/widgets/{widget['kind']}"
    print(f"{widget['title']} - {widget['subtitle']}")

    try:
        subject = _choose("Ämne", widget["subjects"])
        grade = _choose("Årskurs", widget["grades"])
        fields = {}
        for field in widget["fields"]:
            if args.file is not None and widget["accepts_upload"] and field["name"] == "text":
                continue
            fields[field["name"]] = input(f"{field['label']}: ").strip()
        action_id = _choose("Vad vill du skapa?", widget["actions"], key="id")
    except EOFError:
        print()
        return 0

    resp = requests.put(
        f"{base}/form",
        json={"subject": subject, "grade": grade, "fields": fields},
        timeout=args.timeout,
    )
    if resp.status_code != 200:
        print(f"Error {resp.status_code}: {resp.text}")
        return 1

    if args.file is not None:
        with args.file.open("rb") as handle:
            resp = requests.post(f"{base}/import", files={"file": (args.file.name, handle)}, timeout=args.timeout)
        if resp.status_code != 200:
            print(f"Error {resp.status_code}: {resp.text}")
            return 1

    resp = requests.post(
        f"{base}/actions/{action_id}",
        json={"selected_model": args.model},
        timeout=args.timeout,
    )
    if resp.status_code != 200:
        print(f"Error {resp.status_code}: {resp.text}")
        return 1

    data = resp.json()
    if not data["dispatched"]:
        print(f"Nothing sent for action {action_id!r}.")
        return 0
    if data.get("title"):
        print(f"# {data['title']}")
    for message in data["messages"]:
        text = "\n".join(part["text"] for part in message["parts"])
        print(f"[{message['role']}] {text}\n")
    print(f"Continue at {data['location']}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
