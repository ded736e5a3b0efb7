#!/usr/bin/env python3
"""
Demo script for the expense service.

This script walks through listing, filtering, adding and deleting expenses
against a fresh in-memory store, without starting the HTTP server.
"""

from expense_api.exceptions import ExpenseError
from expense_api.repositories import InMemoryExpenseRepository
from expense_api.services import ExpenseService


def print_section(title: str) -> None:
    """Print a section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


def print_summary(service: ExpenseService, **filters: str) -> None:
    summary = service.list_expenses(**filters)
    for expense in summary.expenses:
        print(f"  #{expense.id:<3} {expense.date}  {expense.category:<14} {expense.amount:>8.2f}  {expense.description}")
    print(f"  -- {summary.count} record(s), total {summary.total:.2f}")


def demo_listing(service: ExpenseService) -> None:
    """Demonstrate list and filter operations."""
    print_section("Seeded Expenses")
    print_summary(service)

    print_section("Filter: category=food")
    print_summary(service, category="food")

    print_section("Filter: 10 <= amount <= 50")
    print_summary(service, min_amount="10", max_amount="50")


def demo_changes(service: ExpenseService) -> None:
    """Demonstrate create and delete, including rejected requests."""
    print_section("Add and Delete")

    expense = service.add_expense("Coffee", "4.5", "Food")
    print(f"  ✓ Added #{expense.id}: {expense.description} ({expense.amount:.2f})")

    service.delete_expense(str(expense.id))
    print(f"  ✓ Deleted #{expense.id}")

    attempts = [
        ("add with negative amount", lambda: service.add_expense("Refund", "-10", "Misc")),
        ("add without category", lambda: service.add_expense("Taxi", "12", "")),
        ("delete unknown id", lambda: service.delete_expense("999")),
    ]
    for label, attempt in attempts:
        try:
            attempt()
        except ExpenseError as e:
            print(f"  ✗ {label}: {e.status_code} {e.message}")


def main() -> None:
    """Run all demos."""
    service = ExpenseService.create(repository=InMemoryExpenseRepository.create(seed=True))
    demo_listing(service)
    demo_changes(service)
    print_section("Final State")
    print_summary(service)


if __name__ == "__main__":
    main()
