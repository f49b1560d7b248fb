"""
Unit tests for bills and payment transactions

- final amount = total + tax - discount, recomputed on every write
- one bill per order
- a payment larger than the bill's final amount is rejected, nothing is written
"""

from decimal import Decimal
from uuid import uuid4

import pytest

from src.platform.exception.exceptions import (
    BadRequestError,
    ConflictError,
    DomainError,
    NotFoundError,
)
from src.service.restaurant.app.command.bill_command_use_case import BillCommandUseCase
from src.service.restaurant.app.command.create_transaction_use_case import (
    CreateTransactionUseCase,
)
from src.service.restaurant.domain.entity.bill_entity import Bill
from test.service.restaurant.unit.helpers import FakeUnitOfWork, RepositoryMocks, make_bill


@pytest.mark.unit
class TestBillEntity:
    def test_final_amount(self) -> None:
        bill = make_bill(total='120.00', tax='12.50', discount='20.00')

        assert bill.final_amount == Decimal('112.50')

    def test_negative_amounts_rejected(self) -> None:
        with pytest.raises(DomainError):
            Bill.create(order_id=uuid4(), total_amount=Decimal('-1'))

    def test_ensure_covers(self) -> None:
        bill = make_bill(total='50.00', tax='0.00')

        bill.ensure_covers(Decimal('50.00'))
        with pytest.raises(BadRequestError) as exc_info:
            bill.ensure_covers(Decimal('50.01'))

        assert exc_info.value.message == 'Insufficient funds.'


@pytest.mark.unit
class TestBillCommandUseCase:
    @pytest.mark.asyncio
    async def test_create_bill(self) -> None:
        mocks = RepositoryMocks()
        use_case = BillCommandUseCase(bill_repo=mocks.bill_repo)

        bill = await use_case.create_bill(
            order_id=uuid4(),
            total_amount=Decimal('80.00'),
            tax=Decimal('8.00'),
            discount=Decimal('3.00'),
        )

        assert bill.final_amount == Decimal('85.00')
        mocks.bill_repo.create.assert_awaited_once_with(bill)

    @pytest.mark.asyncio
    async def test_second_bill_for_order_conflicts(self) -> None:
        mocks = RepositoryMocks()
        mocks.bill_repo.get_by_order_id.return_value = make_bill()
        use_case = BillCommandUseCase(bill_repo=mocks.bill_repo)

        with pytest.raises(ConflictError):
            await use_case.create_bill(
                order_id=uuid4(),
                total_amount=Decimal('10'),
                tax=Decimal('0'),
                discount=Decimal('0'),
            )

        mocks.bill_repo.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_update_recomputes_final_amount(self) -> None:
        bill = make_bill(total='100.00', tax='10.00')
        mocks = RepositoryMocks(bill=bill)
        use_case = BillCommandUseCase(bill_repo=mocks.bill_repo)

        updated = await use_case.update_bill(
            bill_id=bill.id,
            order_id=bill.order_id,
            total_amount=Decimal('200.00'),
            tax=Decimal('20.00'),
            discount=Decimal('50.00'),
        )

        assert updated.final_amount == Decimal('170.00')
        mocks.bill_repo.get_by_order_id.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_delete_missing_bill(self) -> None:
        mocks = RepositoryMocks(bill=None)
        use_case = BillCommandUseCase(bill_repo=mocks.bill_repo)
        bill_id = uuid4()

        with pytest.raises(NotFoundError) as exc_info:
            await use_case.delete_bill(bill_id=bill_id)

        assert exc_info.value.message == f'Bill not found with ID: {bill_id}'
        mocks.bill_repo.delete.assert_not_awaited()


@pytest.mark.unit
class TestCreateTransactionUseCase:
    @pytest.mark.asyncio
    async def test_payment_recorded_and_bill_recomputed(self) -> None:
        bill = make_bill(total='100.00', tax='10.00')
        # stale final amount, fixed by the recompute on payment
        bill.discount = Decimal('20.00')
        mocks = RepositoryMocks(bill=bill)
        uow = FakeUnitOfWork(mocks)
        use_case = CreateTransactionUseCase(uow=uow)

        transaction = await use_case.create(
            bill_id=bill.id, amount=Decimal('50.00'), payment_method='card'
        )

        assert transaction.id is not None
        assert transaction.bill_id == bill.id
        assert transaction.amount == Decimal('50.00')
        assert transaction.payment_method == 'card'
        assert bill.final_amount == Decimal('90.00')
        mocks.bill_repo.update.assert_awaited_once_with(bill)
        mocks.transaction_repo.create.assert_awaited_once_with(transaction)
        assert uow.committed is True

    @pytest.mark.asyncio
    async def test_insufficient_funds(self) -> None:
        bill = make_bill(total='30.00', tax='0.00')
        mocks = RepositoryMocks(bill=bill)
        uow = FakeUnitOfWork(mocks)
        use_case = CreateTransactionUseCase(uow=uow)

        with pytest.raises(BadRequestError) as exc_info:
            await use_case.create(bill_id=bill.id, amount=Decimal('30.01'), payment_method='cash')

        assert exc_info.value.message == 'Insufficient funds.'
        mocks.transaction_repo.create.assert_not_awaited()
        mocks.bill_repo.update.assert_not_awaited()
        assert uow.committed is False

    @pytest.mark.asyncio
    async def test_missing_bill(self) -> None:
        mocks = RepositoryMocks(bill=None)
        uow = FakeUnitOfWork(mocks)
        use_case = CreateTransactionUseCase(uow=uow)

        with pytest.raises(NotFoundError):
            await use_case.create(bill_id=uuid4(), amount=Decimal('1'), payment_method='cash')

        assert uow.committed is False

    @pytest.mark.asyncio
    async def test_non_positive_amount(self) -> None:
        bill = make_bill()
        mocks = RepositoryMocks(bill=bill)
        use_case = CreateTransactionUseCase(uow=FakeUnitOfWork(mocks))

        with pytest.raises(DomainError):
            await use_case.create(bill_id=bill.id, amount=Decimal('0'), payment_method='cash')
