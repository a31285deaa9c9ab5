"""
Per-round episode metrics for the asteroid shooter.

An episode is summarised by how far it got (round reached, seconds
survived) and where its points came from (score earned in each round).
The same tracker feeds the training callback and the evaluation report.
"""

import csv
import os
from typing import Any, Dict, List, Optional

from stable_baselines3.common.callbacks import BaseCallback

ROUNDS = (1, 2, 3)


class EpisodeTracker:
    """Accumulates one episode from the env's per-step info dicts"""

    def __init__(self, dt: float):
        self.dt = dt
        self.reset()

    def reset(self):
        self.score_by_round = {r: 0 for r in ROUNDS}
        self.steps_by_round = {r: 0 for r in ROUNDS}
        self._last_score = 0

    def update(self, info: Dict[str, Any]):
        r = int(info["round"])
        self.score_by_round[r] += info["score"] - self._last_score
        self._last_score = info["score"]
        self.steps_by_round[r] += 1

    def finish(self, info: Dict[str, Any]) -> Dict[str, Any]:
        record = {
            "score": info["score"],
            "round": int(info["round"]),
            "survival_s": sum(self.steps_by_round.values()) * self.dt,
            "kills": info["asteroids_destroyed"],
            "lives_lost": info["lives_lost"],
            "shots": info["shots_fired"],
        }
        for r in ROUNDS:
            record[f"score_r{r}"] = self.score_by_round[r]
            record[f"time_r{r}"] = self.steps_by_round[r] * self.dt
        self.reset()
        return record


def summarize_episodes(records: List[Dict[str, Any]]) -> Dict[str, Any]:
    """Reach rate and mean score per round over a batch of episode records"""
    if not records:
        return {}
    n = len(records)
    shots = sum(r["shots"] for r in records)
    summary = {
        "episodes": n,
        "mean_score": sum(r["score"] for r in records) / n,
        "mean_survival_s": sum(r["survival_s"] for r in records) / n,
        "accuracy": sum(r["kills"] for r in records) / shots if shots else 0.0,
        "reached": {},
        "score_per_round": {},
    }
    for rnd in ROUNDS:
        reached = [r for r in records if r["round"] >= rnd]
        summary["reached"][rnd] = len(reached) / n
        summary["score_per_round"][rnd] = (
            sum(r[f"score_r{rnd}"] for r in reached) / len(reached) if reached else 0.0
        )
    return summary


def format_report(summary: Dict[str, Any]) -> str:
    if not summary:
        return "no finished episodes"
    lines = [
        f"episodes {summary['episodes']}  mean score {summary['mean_score']:.1f}  "
        f"survival {summary['mean_survival_s']:.1f}s  accuracy {summary['accuracy']:.0%}",
    ]
    for rnd in ROUNDS:
        lines.append(f"  round {rnd}: reached {summary['reached'][rnd]:.0%}, "
                     f"score there {summary['score_per_round'][rnd]:.1f}")
    return "\n".join(lines)


class RoundMetricsCallback(BaseCallback):
    """
    Writes one CSV row per finished episode and logs round progress
    to TensorBoard. Expects Monitor-wrapped AsteroidEnv instances.
    """

    def __init__(self, log_dir: str, dt: float, report_every: int = 50, verbose: int = 1):
        super().__init__(verbose)
        self.log_dir = log_dir
        self.dt = dt
        self.report_every = report_every
        self.records: List[Dict[str, Any]] = []
        self._trackers: List[EpisodeTracker] = []
        self._csv_file = None
        self._writer: Optional[csv.DictWriter] = None

    def _on_training_start(self) -> None:
        os.makedirs(self.log_dir, exist_ok=True)
        self._trackers = [EpisodeTracker(self.dt) for _ in range(self.training_env.num_envs)]
        self._csv_file = open(os.path.join(self.log_dir, "episodes.csv"), "w", newline="")

    def _on_step(self) -> bool:
        for tracker, info, done in zip(self._trackers, self.locals["infos"], self.locals["dones"]):
            tracker.update(info)
            if done:
                self._record(tracker.finish(info))
        return True

    def _record(self, record: Dict[str, Any]):
        record = dict(record, timestep=self.num_timesteps)
        self.records.append(record)

        if self._writer is None:
            self._writer = csv.DictWriter(self._csv_file, fieldnames=list(record))
            self._writer.writeheader()
        self._writer.writerow(record)
        self._csv_file.flush()

        self.logger.record("asteroids/score", record["score"])
        self.logger.record("asteroids/round_reached", record["round"])
        self.logger.record("asteroids/survival_s", record["survival_s"])

        if self.verbose > 0 and len(self.records) % self.report_every == 0:
            recent = summarize_episodes(self.records[-self.report_every:])
            print(f"[RoundMetrics] timestep {self.num_timesteps:,}\n{format_report(recent)}")

    def _on_training_end(self) -> None:
        if self._csv_file:
            self._csv_file.close()
