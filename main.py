# SparseBlade: Sparse Blade Geometric Algebra
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want
# the industry to build upon this "unbending" paradigm.

"""SparseBlade CLI Entry Point.

Prints the basis product demonstration. With no overrides this is the
spacetime signature over four basis vectors; e.g.
``python main.py signature=euclidean basis.count=3`` picks another one.
"""

import hydra
from omegaconf import DictConfig

from tasks.products import BasisProductTask


@hydra.main(version_base=None, config_path="conf", config_name="config")
def main(cfg: DictConfig):
    """Dispatches the configured task.

    Args:
        cfg (DictConfig): The plan.
    """
    task_name = cfg.name

    task_map = {
        'basis_products': BasisProductTask,
    }

    if task_name not in task_map:
        raise ValueError(f"Unknown task: {task_name}. Available: {list(task_map.keys())}")

    TaskClass = task_map[task_name]
    task = TaskClass(cfg)
    task.run()

if __name__ == "__main__":
    main()
