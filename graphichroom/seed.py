"""
Default data for a new session.

The category list covers a typical design agency; the sample
transactions give the dashboard something to show on first launch.
"""

from datetime import date

from graphichroom.models.ledger import Category, Transaction, TransactionType


DESIGN_CATEGORIES: tuple[Category, ...] = (
    # Pemasukan
    Category(id="inc1", name="Pesanan Logo", type=TransactionType.INCOME),
    Category(id="inc2", name="Desain Lainnya", type=TransactionType.INCOME),
    Category(id="inc3", name="Percetakan", type=TransactionType.INCOME),
    Category(id="inc4", name="Pemasukan Lainnya", type=TransactionType.INCOME),
    # Pengeluaran
    Category(id="exp1", name="Biaya Iklan", type=TransactionType.EXPENSE),
    Category(id="exp2", name="Gaji Karyawan", type=TransactionType.EXPENSE),
    Category(id="exp3", name="Internet", type=TransactionType.EXPENSE),
    Category(id="exp4", name="Rumah Tangga", type=TransactionType.EXPENSE),
    Category(id="exp5", name="Konsumsi", type=TransactionType.EXPENSE),
    Category(id="exp6", name="Kontrakan", type=TransactionType.EXPENSE),
    Category(id="exp7", name="Maintenance", type=TransactionType.EXPENSE),
)


SAMPLE_TRANSACTIONS: tuple[Transaction, ...] = (
    Transaction(
        id="t1",
        date=date(2024, 5, 1),
        amount=2_500_000,
        category="Pesanan Logo",
        description="Logo Project - Coffee Shop",
        type=TransactionType.INCOME,
    ),
    Transaction(
        id="t2",
        date=date(2024, 5, 2),
        amount=500_000,
        category="Biaya Iklan",
        description="Instagram Ads Promo Lebaran",
        type=TransactionType.EXPENSE,
    ),
    Transaction(
        id="t3",
        date=date(2024, 5, 5),
        amount=1_500_000,
        category="Desain Lainnya",
        description="Desain Menu & Banner",
        type=TransactionType.INCOME,
    ),
    Transaction(
        id="t4",
        date=date(2024, 5, 10),
        amount=350_000,
        category="Internet",
        description="WiFi Bulanan IndiHome",
        type=TransactionType.EXPENSE,
    ),
    Transaction(
        id="t5",
        date=date(2024, 5, 15),
        amount=4_500_000,
        category="Gaji Karyawan",
        description="Gaji Desainer Junior",
        type=TransactionType.EXPENSE,
    ),
    Transaction(
        id="t6",
        date=date(2024, 5, 20),
        amount=500_000,
        category="Konsumsi",
        description="Snack & Kopi Meeting",
        type=TransactionType.EXPENSE,
    ),
    Transaction(
        id="t7",
        date=date(2024, 5, 22),
        amount=3_000_000,
        category="Percetakan",
        description="Cetak Brosur Client A",
        type=TransactionType.INCOME,
    ),
)
