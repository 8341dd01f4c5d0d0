import pandas as pd
import streamlit as st

from models import ExpenseSummary


def daily_frame(summary: ExpenseSummary) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {"comment": e.comment or "(no comment)", "amount": e.amount, "currency": e.currency}
            for e in summary.daily_expenses
        ],
        columns=["comment", "amount", "currency"],
    )


def monthly_frame(summary: ExpenseSummary) -> pd.DataFrame:
    return pd.DataFrame(
        [{"day": b.day, "total": b.total} for b in summary.monthly_buckets],
        columns=["day", "total"],
    )


def totals_row(summary: ExpenseSummary):
    c1, c2, c3 = st.columns(3)
    c1.metric("Daily Total", f"{summary.daily_total:,.2f}")
    c2.metric("Monthly Total", f"{summary.monthly_total:,.2f}")
    c3.metric("Expenses Today", len(summary.daily_expenses))
    st.caption("Totals add amounts as-is; currencies are not converted.")


def charts_section(summary: ExpenseSummary):
    col1, col2 = st.columns(2)

    with col1:
        st.subheader("Daily Expenses")
        df = daily_frame(summary)
        if df.empty:
            st.info("No expenses for this day")
        else:
            st.bar_chart(df, x="comment", y="amount")

            st.markdown("**Currencies**")
            counts = (
                df.groupby("currency")["amount"]
                .agg(["count", "sum"])
                .reset_index()
                .rename(columns={"count": "expenses", "sum": "amount"})
            )
            st.dataframe(counts, hide_index=True)

    with col2:
        st.subheader(f"Monthly Expenses ({summary.selected_date:%B %Y})")
        df = monthly_frame(summary)
        if df.empty:
            st.info("No expenses this month")
        else:
            # day labels are zero padded, so the category axis stays in day order
            st.bar_chart(df, x="day", y="total")
