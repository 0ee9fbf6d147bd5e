"""
Presentation of classification results.

Text output mirrors a simple "features then label" row per point; the
DataFrame form is used for CSV export.
"""

import pandas as pd

TRAIN_HEADER = "TRAIN (features + label):"
TEST_HEADER = "TEST (features + predicted label):"


def format_value(value):
    if isinstance(value, int):
        return str(value)
    # 6 significant digits
    return f"{value:g}"


def format_row(point):
    """Space separated features followed by the point's label."""
    return " ".join(format_value(v) for v in point.as_row())


def format_dataset(points):
    return [format_row(p) for p in points]


def render_results(train, predictions):
    """Full text report: training rows, a blank line, then test rows."""
    lines = [TRAIN_HEADER]
    lines.extend(format_dataset(train))
    lines.append("")
    lines.append(TEST_HEADER)
    lines.extend(format_dataset(predictions))
    return "\n".join(lines)


def to_frame(points, name):
    """
    Convert a dataset into a DataFrame.

    Columns are ``set`` (the given name), ``x0`` .. ``x{d-1}`` and ``label``.
    """
    rows = []
    for p in points:
        row = {"set": name}
        row.update({f"x{j}": v for j, v in enumerate(p.features)})
        row["label"] = p.label
        rows.append(row)
    return pd.DataFrame(rows)


def export_csv(train, predictions, path):
    df = pd.concat([to_frame(train, "train"), to_frame(predictions, "test")], ignore_index=True)
    df.to_csv(path, index=False)
    return df
