"""Basic usage example for doublylinked."""

import logging

from doublylinked import DoublyLinkedList


def main() -> None:
    """Demonstrate basic list operations."""
    logging.basicConfig(level=logging.DEBUG)

    print("=== Building ===\n")
    tasks = DoublyLinkedList[str]()
    tasks.append("send_email").append("process_data").append("generate_report")
    tasks.prepend("warm_cache")
    print(f"Tasks: {tasks}")
    print(f"Size: {len(tasks)}\n")

    print("=== Searching and deleting ===\n")
    node = tasks.find("process_data")
    print(f"Found: {node}")
    tasks.delete("process_data")
    print(f"After delete: {tasks}\n")

    print("=== Both ends ===\n")
    print(f"Head removed: {tasks.delete_head()}")
    print(f"Tail removed: {tasks.delete_tail()}")
    print(f"Remaining: {tasks}\n")

    print("=== Reversal ===\n")
    numbers = DoublyLinkedList.from_array(range(1, 6))
    print(f"Forward:  {numbers.to_string(lambda n: f'#{n}')}")
    print(f"Reversed: {numbers.reverse()}")


if __name__ == "__main__":
    main()
