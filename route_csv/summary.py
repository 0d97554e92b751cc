import pandas as pd

from .compiler import CompilationReport

ROUTE_COLUMNS = ["carrier", "outbound", "return", "departure", "arrival", "comment"]


def routes_frame(report: CompilationReport) -> pd.DataFrame:
    """Parsed routes of a report as a DataFrame, one row per compiled line."""
    records = [
        {
            "carrier": route.carrier,
            "outbound": route.outbound_number,
            "return": route.return_number,
            "departure": route.departure,
            "arrival": route.arrival,
            "comment": route.comment,
        }
        for route in report.routes
    ]
    return pd.DataFrame.from_records(records, columns=ROUTE_COLUMNS)


def carrier_summary(report: CompilationReport) -> pd.DataFrame:
    """Route and codeshare counts per carrier, sorted by carrier code."""
    df = routes_frame(report)
    if df.empty:
        return pd.DataFrame(columns=["carrier", "routes", "codeshares"])
    df["codeshare"] = df["comment"].notna()
    summary = (
        df.groupby("carrier")
        .agg(routes=("arrival", "size"), codeshares=("codeshare", "sum"))
        .reset_index()
        .sort_values("carrier")
        .reset_index(drop=True)
    )
    summary["codeshares"] = summary["codeshares"].astype(int)
    return summary
