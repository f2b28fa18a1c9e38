"""
Streamlit Frontend for Graphichroom Ledger

Single-page bookkeeping dashboard for a small design agency.

Six panes, picked from the sidebar:
- Dashboard: totals, cash-flow and expense charts, AI analysis
- Transaksi: searchable list and the new-transaction form
- Laporan: monthly report
- Kategori: category management
- Invoice Generator: printable invoice
- Brief Desain: AI-drafted design brief

All state lives in the BookkeepingSession kept in st.session_state,
so every browser session has its own ledger.
"""

import asyncio
from datetime import date

import plotly.graph_objects as go
import streamlit as st
import streamlit.components.v1 as components

from graphichroom.audit import create_correlation_id
from graphichroom.config import get_settings
from graphichroom.formatting import ai_box_html, format_rupiah, format_signed_amount
from graphichroom.invoices import render_invoice_html
from graphichroom.models.invoice import CLIENT_NAME_MAX_LENGTH, ITEM_DESCRIPTION_MAX_LENGTH
from graphichroom.models.ledger import CATEGORY_NAME_MAX_LENGTH, TransactionType
from graphichroom.orchestrator import BookkeepingSession, create_app_components
from graphichroom.reports import month_name
from graphichroom.stores import NotFoundError


CHART_COLORS = ["#f97316", "#eab308", "#22c55e", "#3b82f6", "#a855f7", "#ec4899"]
INCOME_COLOR = "#22c55e"
EXPENSE_COLOR = "#ef4444"


# Page configuration
st.set_page_config(
    page_title="Graphichroom",
    page_icon="🟠",
    layout="wide",
    initial_sidebar_state="expanded",
)

st.markdown("""
<style>
    .stButton>button {
        width: 100%;
    }
    .ai-box {
        padding: 20px;
        background-color: rgba(24, 24, 27, 0.5);
        border-radius: 10px;
        border-left: 4px solid #f97316;
        margin: 10px 0;
        white-space: pre-line;
    }
    @media print {
        [data-testid="stSidebar"] { display: none !important; }
    }
</style>
""", unsafe_allow_html=True)


def run_async(coro):
    """Helper to run async functions in Streamlit."""
    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)
    try:
        return loop.run_until_complete(coro)
    finally:
        loop.close()


def get_session() -> BookkeepingSession:
    """Get or create this browser session's ledger."""
    if "ledger" not in st.session_state:
        st.session_state.ledger = create_app_components()
    return st.session_state.ledger


def main():
    """Main application entry point."""
    session = get_session()

    st.sidebar.title("Graphichroom")
    st.sidebar.markdown("---")

    page = st.sidebar.radio(
        "Menu",
        [
            "Dashboard",
            "Transaksi",
            "Laporan",
            "Kategori",
            "Invoice Generator",
            "Brief Desain",
        ],
        index=0,
    )

    st.sidebar.markdown("---")
    st.sidebar.markdown("**✨ AI Insight**  \nAnalisis keuangan cerdas.")
    if st.sidebar.button("Analisis Sekarang"):
        with st.spinner("Menganalisis..."):
            st.session_state.ai_advice = run_async(
                session.request_financial_advice(correlation_id=create_correlation_id())
            )

    if page == "Dashboard":
        render_dashboard_page(session)
    elif page == "Transaksi":
        render_transactions_page(session)
    elif page == "Laporan":
        render_reports_page(session)
    elif page == "Kategori":
        render_categories_page(session)
    elif page == "Invoice Generator":
        render_invoice_page(session)
    elif page == "Brief Desain":
        render_brief_page(session)


def render_dashboard_page(session: BookkeepingSession):
    st.title("Financial Overview")

    stats = session.dashboard_stats()
    col1, col2, col3 = st.columns(3)
    col1.metric("Total Saldo", format_rupiah(stats.total_balance))
    col2.metric("Pemasukan", format_rupiah(stats.total_income))
    col3.metric("Pengeluaran", format_rupiah(stats.total_expense))

    advice = st.session_state.get("ai_advice")
    if advice:
        st.markdown(
            ai_box_html(advice),
            unsafe_allow_html=True,
        )

    left, right = st.columns([2, 1])

    with left:
        st.subheader("Arus Kas")
        series = session.cash_flow_series()
        fig = go.Figure()
        fig.add_trace(go.Bar(
            x=[b.label for b in series],
            y=[b.income for b in series],
            name="Pemasukan",
            marker_color=INCOME_COLOR,
        ))
        fig.add_trace(go.Bar(
            x=[b.label for b in series],
            y=[b.expense for b in series],
            name="Pengeluaran",
            marker_color=EXPENSE_COLOR,
        ))
        fig.update_layout(template="plotly_dark", barmode="group", margin=dict(t=30, b=10, l=10, r=10))
        st.plotly_chart(fig, use_container_width=True)

    with right:
        st.subheader("Kategori Pengeluaran")
        buckets = session.expense_series()
        if buckets:
            fig = go.Figure(go.Pie(
                labels=[b.label for b in buckets],
                values=[b.value for b in buckets],
                hole=0.6,
                marker=dict(colors=[CHART_COLORS[i % len(CHART_COLORS)] for i in range(len(buckets))]),
            ))
            fig.update_layout(template="plotly_dark", margin=dict(t=30, b=10, l=10, r=10))
            st.plotly_chart(fig, use_container_width=True)
        else:
            st.caption("Belum ada data pengeluaran")


def render_transactions_page(session: BookkeepingSession):
    st.title("Riwayat Transaksi")

    with st.expander("➕ Transaksi Baru"):
        render_transaction_form(session)

    term = st.text_input("Cari...", value="")
    rows = session.search(term)

    if not rows:
        st.info("Tidak ada transaksi yang cocok.")
        return

    st.dataframe(
        [
            {
                "Tanggal": tx.date.isoformat(),
                "Keterangan": tx.description,
                "Kategori": tx.category,
                "Jumlah": format_signed_amount(tx),
            }
            for tx in rows
        ],
        use_container_width=True,
        hide_index=True,
    )


def render_transaction_form(session: BookkeepingSession):
    tx_type = st.radio(
        "Jenis",
        list(TransactionType),
        format_func=lambda t: t.label,
        horizontal=True,
        index=1,
    )

    with st.form("new_transaction", clear_on_submit=True):
        amount = st.text_input("Jumlah (Rp)", placeholder="0")
        description = st.text_input("Keterangan", placeholder="Contoh: Desain Logo Client A")
        options = [c.name for c in session.categories_for(tx_type)]
        category = st.selectbox("Kategori", [""] + options)
        tx_date = st.date_input("Tanggal", value=date.today())
        submitted = st.form_submit_button("Simpan Transaksi", type="primary")

    if submitted:
        transaction, result = session.add_transaction(
            amount=amount,
            type=tx_type,
            category=category,
            description=description,
            date=tx_date,
        )
        for issue in result.issues:
            if issue.severity == "error":
                st.error(issue.message)
            elif issue.severity == "warning":
                st.warning(issue.message)
        if transaction:
            st.success(f"Tersimpan: {transaction.description or transaction.category}")


def render_reports_page(session: BookkeepingSession):
    st.title("Laporan Keuangan")

    today = date.today()
    years = get_settings().app.report_years_list or [today.year]

    col1, col2 = st.columns(2)
    with col1:
        month = st.selectbox("Bulan", list(range(12)), index=today.month - 1, format_func=month_name)
    with col2:
        year_index = years.index(today.year) if today.year in years else len(years) - 1
        year = st.selectbox("Tahun", years, index=year_index)

    report = session.report_stats(month, year)

    col1, col2, col3 = st.columns(3)
    col1.metric("Total Pemasukan", format_rupiah(report.income))
    col2.metric("Total Pengeluaran", format_rupiah(report.expense))
    col3.metric("Laba Bersih", format_rupiah(report.net))

    st.markdown(
        f"Menampilkan ringkasan untuk **{report.count} transaksi** pada periode ini."
    )


def render_categories_page(session: BookkeepingSession):
    st.title("Manajemen Kategori")

    with st.form("new_category", clear_on_submit=True):
        col1, col2, col3 = st.columns([3, 2, 1])
        with col1:
            name = st.text_input(
                "Nama Kategori",
                placeholder="Misal: Jasa Desain UI",
                max_chars=CATEGORY_NAME_MAX_LENGTH,
            )
        with col2:
            cat_type = st.selectbox(
                "Jenis",
                list(TransactionType),
                index=1,
                format_func=lambda t: t.label,
            )
        with col3:
            submitted = st.form_submit_button("Simpan")
    if submitted and name.strip() and session.add_category(name, cat_type) is None:
        st.warning("Nama kategori tidak valid.")

    for tx_type, column in zip(TransactionType, st.columns(2)):
        with column:
            st.subheader(f"Kategori {tx_type.label}")
            for category in session.categories_for(tx_type):
                left, right = st.columns([5, 1])
                left.write(category.name)
                if right.button("🗑", key=f"del-{category.id}"):
                    try:
                        session.remove_category(category.id)
                    except NotFoundError:
                        st.warning("Kategori sudah dihapus.")
                    else:
                        st.rerun()


def render_invoice_page(session: BookkeepingSession):
    st.title("Invoice Generator")

    if "invoice" not in st.session_state:
        st.session_state.invoice = session.new_invoice()
    draft = st.session_state.invoice

    editor, preview = st.columns([1, 2])

    with editor:
        client = st.text_input(
            "Nama Client",
            value=draft.invoice.client_name,
            placeholder="PT Kreatif Maju Jaya",
            max_chars=CLIENT_NAME_MAX_LENGTH,
        )
        draft.set_client(client)

        with st.form("invoice_item", clear_on_submit=True):
            description = st.text_input("Deskripsi", max_chars=ITEM_DESCRIPTION_MAX_LENGTH)
            quantity = st.text_input("Qty")
            price = st.text_input("Harga")
            if st.form_submit_button("Tambah Item"):
                session.add_invoice_item(draft, description, price, quantity)

        if st.button("Invoice Baru"):
            st.session_state.invoice = session.new_invoice()
            st.rerun()

    with preview:
        invoice = draft.invoice
        components.html(
            render_invoice_html(invoice),
            height=520 + 44 * len(invoice.items),
            scrolling=True,
        )


def render_brief_page(session: BookkeepingSession):
    st.title("Brief Desain")

    topic = st.text_area(
        "Topik proyek",
        placeholder="Contoh: Rebranding kedai kopi kekinian di Bandung",
    )

    if st.button("✨ Buat Kerangka Brief dengan AI", type="primary", disabled=not topic.strip()):
        with st.spinner("Sedang Berpikir..."):
            st.session_state.brief_result = run_async(session.request_brief(topic))

    result = st.session_state.get("brief_result")
    if result:
        st.text(result)


if __name__ == "__main__":
    main()
