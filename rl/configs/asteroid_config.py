"""
Agent training settings for the asteroid shooter
"""

# Keyword arguments for AsteroidEnv
ENV_CONFIG = {
    "dt": 1/30,
    "max_steps": 3600,  # 2 minutes of play; round 3 begins at 35s
    "k_asteroids": 6,
    "shoot_cooldown_steps": 8,
}

# Event weights, see AsteroidEnv._compute_reward
REWARD_CONFIGS = {
    # shoot what falls, avoid what you can't
    "baseline": {"R_KILL": 1.0, "R_HIT": 1.0, "R_SHOT": 0.01, "R_ALIVE": 0.001, "R_DEATH": 5.0},
    # dodge first: reaching round 3 matters more than the score
    "survival": {"R_KILL": 0.3, "R_HIT": 3.0, "R_SHOT": 0.02, "R_ALIVE": 0.01, "R_DEATH": 10.0},
}

# Long episodes and sparse kills -> a longer horizon than SB3's default gamma
PPO_CONFIG = {
    "policy": "MlpPolicy",
    "learning_rate": 2.5e-4,
    "n_steps": 2048,
    "batch_size": 128,
    "gamma": 0.995,
    "ent_coef": 0.005,
    "verbose": 0,
}

TRAINING_CONFIG = {
    "total_timesteps": 1_000_000,
    "n_envs": 4,
    "checkpoint_every": 50_000,
    "out_dir": "./runs",
    "eval_episodes": 20,
}
