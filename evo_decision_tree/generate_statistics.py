import logging
from itertools import product
from multiprocessing import Pool
from pathlib import Path

import pandas as pd
from tqdm import tqdm

from .Config import *
from .evolve import evolve

RESULT_DIR = Path("logs/statistics.csv")
DEPTHS = list(range(1, 7))
SEEDS = [SAMPLE_SEED + i for i in range(8)]
GENERATIONS = 10


def _work(args: tuple[int, int]) -> str:
    depth, seed = args
    _, history = evolve(GENERATIONS, depth=depth, seed=seed)
    last = history.iloc[-1]
    return ",".join(map(str, (depth, seed, GENERATIONS, history["best"].iloc[0], last["best"], last["mean"], last["worst"])))


def generate_statistics() -> None:
    tasks = list(product(DEPTHS, SEEDS))
    RESULT_DIR.parent.mkdir(parents=True, exist_ok=True)
    with Pool() as pool, open(RESULT_DIR, "w") as f:
        f.write("depth,seed,generations,first best,best,mean,worst\n")
        for result in tqdm(pool.imap_unordered(_work, tasks), total=len(tasks)):
            f.write(result + "\n")
            f.flush()


def sort_result() -> None:
    df = pd.read_csv(RESULT_DIR)
    df = df.sort_values(["depth", "seed"])
    df.to_csv(RESULT_DIR, index=False)
    summary = df.groupby("depth")[["first best", "best", "mean", "worst"]].mean()
    summary.to_csv(RESULT_DIR.parent / "summary.csv")


if __name__ == "__main__":
    logging.basicConfig(level=logging.WARNING)
    generate_statistics()
    sort_result()
