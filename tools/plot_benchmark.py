import sys, os
import pandas as pd
import matplotlib.pyplot as plt

def _bar(agg, col, title, ylabel, out):
    plt.figure(figsize=(7,4))
    plt.bar(agg["algorithm"], agg[f"{col}_mean"], yerr=agg[f"{col}_std"])
    plt.title(title)
    plt.xlabel("Algorithm")
    plt.ylabel(ylabel)
    plt.xticks(rotation=15)
    plt.tight_layout(); plt.savefig(out, bbox_inches="tight"); plt.close()
    print("Saved:", out)

def main(p):
    df = pd.read_csv(p)
    # Path metrics only make sense for successful runs
    ok = df[df["success"] == 1]

    agg = df.groupby("algorithm").agg(
        expanded_mean=("expanded", "mean"),
        expanded_std=("expanded", "std"),
        time_s_mean=("time_s", "mean"),
        time_s_std=("time_s", "std"),
    ).reset_index()
    cost = ok.groupby("algorithm").agg(
        cost_mean=("cost", "mean"),
        cost_std=("cost", "std"),
    ).reset_index()
    print("\nAggregate:\n", agg.merge(cost, on="algorithm", how="left"))

    d = os.path.dirname(p)
    _bar(agg, "expanded", "Average tiles expanded by algorithm", "Tiles expanded",
         os.path.join(d, "benchmark_expanded_bar.png"))
    _bar(agg, "time_s", "Average runtime by algorithm", "Time (s)",
         os.path.join(d, "benchmark_time_bar.png"))
    _bar(cost, "cost", "Average path cost (successful runs)", "Cost",
         os.path.join(d, "benchmark_cost_bar.png"))

if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python plot_benchmark.py <path/to/benchmark.csv>")
        raise SystemExit(1)
    main(sys.argv[1])
