"""Application service: Import Snapshot use case.

An import is a full replace, not a merge.  The snapshot arrives already
decoded and validated, so the only thing left that can fail is a write.
If one does, the collections already written are put back the way they
were before the error propagates.
"""

from __future__ import annotations

import logging

from posledger.domain.exceptions import StorageError
from posledger.domain.model.snapshot import Snapshot
from posledger.domain.repository.company_repository import CompanyRepository
from posledger.domain.repository.product_repository import ProductRepository
from posledger.domain.repository.sale_repository import SaleRepository

logger = logging.getLogger(__name__)


class ImportSnapshotHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        sale_repo: SaleRepository,
        company_repo: CompanyRepository,
    ) -> None:
        self._product_repo = product_repo
        self._sale_repo = sale_repo
        self._company_repo = company_repo

    def handle(self, snapshot: Snapshot) -> None:
        previous = Snapshot(
            products=self._product_repo.list_all(),
            sales=self._sale_repo.list_all(),
            company=self._company_repo.get(),
        )
        try:
            self._write(snapshot)
        except StorageError:
            logger.error("Import failed; restoring the previous catalog, ledger and company info")
            self._restore(previous)
            raise

        logger.info(
            "Imported %d product(s) and %d sale(s)",
            len(snapshot.products), len(snapshot.sales),
        )

    def _write(self, snapshot: Snapshot) -> None:
        self._product_repo.replace_all(snapshot.products)
        self._sale_repo.replace_all(snapshot.sales)
        if snapshot.company is not None:
            self._company_repo.save(snapshot.company)

    def _restore(self, previous: Snapshot) -> None:
        # Each collection is restored on its own: the store that failed
        # the import may refuse one of these writes too.
        steps = (
            ("catalog", lambda: self._product_repo.replace_all(previous.products)),
            ("ledger", lambda: self._sale_repo.replace_all(previous.sales)),
            ("company info", lambda: self._company_repo.save(previous.company)),
        )
        for label, restore in steps:
            try:
                restore()
            except StorageError as exc:
                logger.error("Could not restore the %s: %s", label, exc)
