"""
Seed a running service with extra todo items from extra_todo_data.json via POST /api/todos.
"""

import json
from pathlib import Path

import httpx

BASE_URL = "http://localhost:8080"
TODOS_PATH = "/api/todos"
DATA_FILE = Path(__file__).parent / "extra_todo_data.json"


def post_todos(client: httpx.Client, todos: list[dict]) -> list[dict]:
    created = []
    for i, todo in enumerate(todos, start=1):
        resp = client.post(TODOS_PATH, json=todo)
        resp.raise_for_status()
        created.append(resp.json())
        print(f"[{i}/{len(todos)}] Created: {todo['title']}")
    return created


def main() -> None:
    todos = json.loads(DATA_FILE.read_text())

    with httpx.Client(base_url=BASE_URL) as client:
        post_todos(client, todos)

    print(f"\nDone. {len(todos)} todos added.")


if __name__ == "__main__":
    main()
