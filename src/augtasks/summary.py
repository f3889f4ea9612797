"""
Batch summaries as pandas tables. Used by `augtasks stats` and for eyeballing
length distributions of generated batches.
"""
import pandas as pd

from augtasks.encoding import decode_column
from augtasks.tasks.add import NUM_SYMBOLS, AddTask
from augtasks.tasks.copy import CopyTask

LENGTH_COLUMNS = ["input_len", "label_len"]


def batch_summary(inputs, labels) -> pd.DataFrame:
    """One row per batch item: column lengths of input and label."""
    rows = [
        {"item": i, "input_len": int(x.numel()), "label_len": int(y.numel())}
        for i, (x, y) in enumerate(zip(inputs, labels))
    ]
    return pd.DataFrame(rows, columns=["item", *LENGTH_COLUMNS])


def describe_batch(inputs, labels) -> pd.DataFrame:
    """count/mean/std/min/quartiles/max of the length columns."""
    return batch_summary(inputs, labels)[LENGTH_COLUMNS].describe()


def summary_row(run_config: dict, inputs, labels) -> dict:
    """Flat row for one generated configuration: config values + length stats."""
    df = batch_summary(inputs, labels)
    row = dict(run_config)
    for col in LENGTH_COLUMNS:
        row[f"{col}_mean"] = float(df[col].mean())
        row[f"{col}_min"] = int(df[col].min())
        row[f"{col}_max"] = int(df[col].max())
    return row


def format_example(task, x, y) -> str:
    """Human-readable rendering of one encoded (input, label) pair."""
    if isinstance(task, AddTask):
        a, b, target = task.decode_example(x, y)
        symbols = decode_column(x, NUM_SYMBOLS)
        digits = decode_column(y, NUM_SYMBOLS)
        text = "".join("+" if s == 2 else str(s) for s in symbols)
        return (
            f"  Input:  {text}  ({a} + {b})\n"
            f"  Target: {''.join(str(d) for d in digits)}  ({target})"
        )
    if isinstance(task, CopyTask):
        steps = task.split_input(x)
        values = [int(v) for v in steps[:, 0].tolist()]
        marker = [int(v) for v in steps[:, 1].tolist()]
        target = [int(v) for v in y.reshape(-1).tolist()]
        return (
            f"  Input:  {values}\n"
            f"  Marker: {marker}\n"
            f"  Target: {target}"
        )
    return f"  Input:  {x.reshape(-1).tolist()}\n  Target: {y.reshape(-1).tolist()}"
