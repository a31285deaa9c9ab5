"""
Train and evaluate a PPO agent on the asteroid shooter.

    python -m rl.train --timesteps 500000 --reward survival
    python -m rl.train --eval-only runs/survival/ppo_asteroids.zip --render
    python -m rl.train --random          # random-policy baseline report

Evaluation reports how far the agent gets (reach rate per round) and
where its score comes from, rather than a bare mean reward.
"""

import argparse
import os
import time
from typing import Any, Dict, List, Optional

from stable_baselines3 import PPO
from stable_baselines3.common.callbacks import CheckpointCallback
from stable_baselines3.common.env_util import make_vec_env
from stable_baselines3.common.vec_env import DummyVecEnv, VecNormalize

from game.asteroids import AsteroidEnv
from rl.configs.asteroid_config import ENV_CONFIG, PPO_CONFIG, REWARD_CONFIGS, TRAINING_CONFIG
from rl.metrics_callback import EpisodeTracker, RoundMetricsCallback, format_report, summarize_episodes


def env_kwargs(reward_name: str) -> Dict[str, Any]:
    if reward_name not in REWARD_CONFIGS:
        raise ValueError(f"Unknown reward config: {reward_name}")
    return dict(ENV_CONFIG, reward_config=REWARD_CONFIGS[reward_name])


def train(reward_name: str = "baseline", total_timesteps: Optional[int] = None,
          n_envs: Optional[int] = None, seed: int = 0) -> str:
    """Train PPO and return the path of the saved model"""
    total_timesteps = total_timesteps or TRAINING_CONFIG["total_timesteps"]
    n_envs = n_envs or TRAINING_CONFIG["n_envs"]
    run_dir = os.path.join(TRAINING_CONFIG["out_dir"], reward_name)
    os.makedirs(run_dir, exist_ok=True)

    print(f"[train] PPO, reward '{reward_name}', {total_timesteps:,} steps, {n_envs} envs -> {run_dir}")

    venv = make_vec_env(AsteroidEnv, n_envs=n_envs, seed=seed, env_kwargs=env_kwargs(reward_name))
    venv = VecNormalize(venv, norm_obs=True, norm_reward=True)

    callbacks = [
        CheckpointCallback(
            save_freq=max(1, TRAINING_CONFIG["checkpoint_every"] // n_envs),
            save_path=os.path.join(run_dir, "checkpoints"),
            name_prefix="ppo_asteroids",
        ),
        RoundMetricsCallback(log_dir=run_dir, dt=ENV_CONFIG["dt"]),
    ]

    model = PPO(env=venv, seed=seed, tensorboard_log=os.path.join(run_dir, "tb"), **PPO_CONFIG)
    model.learn(total_timesteps=total_timesteps, callback=callbacks)

    model_path = os.path.join(run_dir, "ppo_asteroids.zip")
    model.save(model_path)
    venv.save(os.path.join(run_dir, "vec_normalize.pkl"))
    print(f"[train] saved {model_path}")
    return model_path


def load_normalizer(path: str, reward_name: str) -> VecNormalize:
    """Observation statistics saved next to the model, frozen for evaluation"""
    venv = DummyVecEnv([lambda: AsteroidEnv(**env_kwargs(reward_name))])
    normalizer = VecNormalize.load(path, venv)
    normalizer.training = False
    normalizer.norm_reward = False
    return normalizer


def evaluate(model: Optional[PPO] = None, normalizer: Optional[VecNormalize] = None,
             reward_name: str = "baseline", n_episodes: int = 20, seed: int = 1000,
             render: bool = False) -> List[Dict[str, Any]]:
    """
    Play full episodes and return one record per episode.

    With no model the agent samples random actions, which gives the
    baseline a trained policy has to beat.
    """
    env = AsteroidEnv(render_mode="human" if render else None, **env_kwargs(reward_name))
    tracker = EpisodeTracker(env.dt)
    records = []

    for episode in range(n_episodes):
        obs, info = env.reset(seed=seed + episode)
        done = False
        while not done:
            if model is None:
                action = env.action_space.sample()
            else:
                if normalizer is not None:
                    obs = normalizer.normalize_obs(obs)
                action, _ = model.predict(obs, deterministic=True)
            obs, _, terminated, truncated, info = env.step(action)
            tracker.update(info)
            done = terminated or truncated

            if render and env._window:
                env._window.dispatch_events()
                env._window.flip()
                time.sleep(env.dt)

        records.append(tracker.finish(info))
        r = records[-1]
        print(f"  episode {episode + 1}: score {r['score']}, round {r['round']}, "
              f"{r['survival_s']:.1f}s")

    env.close()
    return records


def main():
    parser = argparse.ArgumentParser(description="Train / evaluate PPO on the asteroid shooter")
    parser.add_argument("--reward", default="baseline", choices=sorted(REWARD_CONFIGS),
                        help="Reward shaping config (default: baseline)")
    parser.add_argument("--timesteps", type=int, default=None,
                        help=f"Training steps (default: {TRAINING_CONFIG['total_timesteps']:,})")
    parser.add_argument("--n-envs", type=int, default=None, help="Parallel training envs")
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--eval-only", metavar="MODEL", default=None,
                        help="Skip training and evaluate a saved model")
    parser.add_argument("--random", action="store_true", help="Evaluate a random policy only")
    parser.add_argument("--episodes", type=int, default=TRAINING_CONFIG["eval_episodes"])
    parser.add_argument("--render", action="store_true", help="Watch evaluation episodes")
    args = parser.parse_args()

    model = normalizer = None
    if not args.random:
        model_path = args.eval_only or train(args.reward, args.timesteps, args.n_envs, args.seed)
        model = PPO.load(model_path)
        stats_path = os.path.join(os.path.dirname(model_path), "vec_normalize.pkl")
        if os.path.exists(stats_path):
            normalizer = load_normalizer(stats_path, args.reward)

    label = "random policy" if model is None else "PPO"
    print(f"[evaluate] {label}, {args.episodes} episodes")
    records = evaluate(model, normalizer, args.reward, args.episodes, render=args.render)
    print(format_report(summarize_episodes(records)))


if __name__ == "__main__":
    main()
