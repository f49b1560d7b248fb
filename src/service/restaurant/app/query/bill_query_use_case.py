from typing import Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.restaurant.app.interface.i_bill_repo import IBillRepo
from src.service.restaurant.domain.entity.bill_entity import Bill


class BillQueryUseCase:
    def __init__(self, *, bill_repo: IBillRepo) -> None:
        self.bill_repo = bill_repo

    @classmethod
    @inject
    def depends(cls, bill_repo: IBillRepo = Depends(Provide[Container.bill_repo])) -> Self:
        return cls(bill_repo=bill_repo)

    @Logger.io
    async def get_bill(self, *, bill_id: UUID) -> Bill:
        bill = await self.bill_repo.get_by_id(bill_id)
        if not bill:
            raise NotFoundError(f'Bill not found with ID: {bill_id}')
        return bill

    @Logger.io
    async def get_bill_by_order(self, *, order_id: UUID) -> Bill:
        bill = await self.bill_repo.get_by_order_id(order_id)
        if not bill:
            raise NotFoundError(f'Bill not found for order ID: {order_id}')
        return bill
