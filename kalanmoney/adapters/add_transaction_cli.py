"""CLI adapter adding outcome or income transactions to an account.

This module wires the add-transaction use cases to the SQLAlchemy
repositories and provides the ``kalanmoney-add-outcome`` and
``kalanmoney-add-income`` entry points.
"""

import argparse
from typing import Sequence

from kalanmoney.application.exceptions import EntityNotFoundError
from kalanmoney.application.use_cases.add_transaction import (
    AddTransactionRequest,
)
from kalanmoney.domain.exceptions import DomainValidationError
from kalanmoney.infrastructure.container import (
    build_add_income_transaction_use_case,
    build_add_outcome_transaction_use_case,
)
from kalanmoney.infrastructure.logging.logger import get_app_logger


def _parse_args(
    description: str,
    argv: Sequence[str] | None,
) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("--account-id", required=True)
    parser.add_argument("--category-id", required=True)
    parser.add_argument(
        "--amount",
        required=True,
        help="Amount as a decimal string; its sign is ignored.",
    )
    return parser.parse_args(argv)


def _run(use_case_builder, description: str, argv) -> int:
    """Run one add-transaction use case and print its result.

    Returns:
        int: Process exit code, 0 on success.
    """
    args = _parse_args(description, argv)
    logger = get_app_logger()
    try:
        request = AddTransactionRequest(
            account_id=args.account_id,
            category_id=args.category_id,
            amount=args.amount,
        )
        result = use_case_builder().execute(request)
    except (EntityNotFoundError, DomainValidationError) as exc:
        logger.error(exc.message)
        print(f"Error: {exc.message}")
        return 1

    print(
        f"Transaction {result.transaction_id} recorded. "
        f"Account balance: {result.account_balance}"
    )
    return 0


def outcome_main(argv: Sequence[str] | None = None) -> int:
    """Record an outcome (debit) transaction."""
    return _run(
        build_add_outcome_transaction_use_case,
        "Add an outcome transaction to an account.",
        argv,
    )


def income_main(argv: Sequence[str] | None = None) -> int:
    """Record an income (credit) transaction."""
    return _run(
        build_add_income_transaction_use_case,
        "Add an income transaction to an account.",
        argv,
    )


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(outcome_main())
