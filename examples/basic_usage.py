"""Basic usage example for dlinkedlist."""

from dlinkedlist import LinkedList, NodeRemovedError


def main() -> None:
    """Demonstrate append, removal by handle and traversal."""
    tasks = LinkedList[dict]()

    print("=== Basic LinkedList Example ===\n")

    email = tasks.append({"action": "send_email", "to": "user@example.com"})
    tasks.append({"action": "process_data", "records": 100})
    report = tasks.append({"action": "generate_report", "format": "pdf"})

    print(f"Size: {len(tasks)}")
    print(f"First: {tasks.first}")
    print(f"Last: {tasks.last}\n")

    # Handles give O(1) removal without searching
    tasks.remove(email)
    print(f"After removing the email task: {list(tasks)}\n")

    # Payloads may be changed in place while walking the list
    for node in tasks.nodes():
        node.value["done"] = False

    print("Backwards:")
    for task in reversed(tasks):
        print(f"  {task}")

    try:
        tasks.remove(email)
    except NodeRemovedError as exc:
        print(f"\nSecond removal rejected: {exc}")

    tasks.remove(report)
    print(f"\nFinal list: {tasks!r}")


if __name__ == "__main__":
    main()
