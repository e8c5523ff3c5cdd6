"""Tests for the AddIncomeTransactionUseCase."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from kalanmoney.application.exceptions import AccountNotFoundError
from kalanmoney.application.use_cases.add_income_transaction import (
    AddIncomeTransactionOutput,
    AddIncomeTransactionUseCase,
)
from kalanmoney.application.use_cases.add_transaction import (
    AddTransactionRequest,
)
from kalanmoney.domain.models import (
    AccountName,
    Balance,
    FinancialAccount,
    FinancialCategory,
    Owner,
    TimeStamp,
)


class _FixedIdGenerator:
    def new_id(self) -> str:
        return "income-1"


def _build_use_case(account, category) -> tuple[AddIncomeTransactionUseCase, MagicMock]:
    account_queries = MagicMock()
    account_queries.get_account_by_id.return_value = account
    category_queries = MagicMock()
    category_queries.get_category_by_id.return_value = category
    commands = MagicMock()
    use_case = AddIncomeTransactionUseCase(
        account_queries=account_queries,
        category_queries=category_queries,
        account_commands=commands,
        id_generator=_FixedIdGenerator(),
        logger=MagicMock(),
    )
    return use_case, commands


def _account() -> FinancialAccount:
    return FinancialAccount.rehydrate(
        account_id="account-1",
        name=AccountName.create("Main"),
        owner=Owner(subject_id="sub-1", name="Test"),
        balance=Balance(Decimal("-20.00")),
        created_at=TimeStamp.create_now(),
    )


def _category(account: FinancialAccount) -> FinancialCategory:
    return FinancialCategory.rehydrate(
        category_id="category-1",
        name=AccountName.create("Salary"),
        account_id=account.id,
        owner=account.owner,
        balance=Balance(Decimal("0")),
    )


@pytest.mark.parametrize("amount", [Decimal("50.5"), Decimal("-50.5")])
def test_income_is_always_credited(amount: Decimal) -> None:
    account = _account()
    category = _category(account)
    use_case, commands = _build_use_case(account, category)

    result = use_case.execute(
        AddTransactionRequest(account.id, category.id, amount)
    )

    assert isinstance(result, AddIncomeTransactionOutput)
    assert result.transaction_id == "income-1"
    assert result.account_balance == Decimal("30.50")
    assert result.category_balance == Decimal("50.5")
    _, transaction, _ = commands.add_transaction.call_args.args
    assert transaction.amount == Decimal("50.5")
    assert transaction.is_income


def test_income_for_unknown_account_raises() -> None:
    use_case, commands = _build_use_case(None, None)

    with pytest.raises(AccountNotFoundError):
        use_case.execute(AddTransactionRequest("nope", "category-1", 1))

    commands.add_transaction.assert_not_called()
