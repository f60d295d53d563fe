import pandas as pd
import matplotlib.pyplot as plt
from pathlib import Path

HERE = Path(__file__).resolve().parent
CSV_PATH = HERE / "results_overload_detection.csv"
OUT_PATH = HERE / "fig_overload_detection.png"

df = pd.read_csv(CSV_PATH)

print("CSV columns:", list(df.columns))

if "num_errors" not in df.columns:
    raise ValueError("No num_errors column found")

# --------------------------------------------------
# Outcome fractions per number of injected errors
# --------------------------------------------------
x = df["num_errors"]
for outcome in ("corrected", "detected", "miscorrected"):
    plt.plot(x, df[outcome] / df["trials"], marker="o", label=outcome)

plt.xlabel("Injected symbol errors")
plt.ylabel("Fraction of trials")
plt.title("Reed-Solomon decode outcomes vs. number of errors")
plt.legend()
plt.grid(True)
plt.tight_layout()

plt.savefig(OUT_PATH, dpi=200)
plt.show()

print(f"Saved plot → {OUT_PATH}")
