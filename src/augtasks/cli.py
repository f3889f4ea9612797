"""
CLI for augtasks. Invoke as: augtasks generate ... | augtasks stats ... | augtasks list ...
"""
import argparse
import itertools
from types import SimpleNamespace
from importlib.metadata import version, PackageNotFoundError

import pandas as pd

from augtasks.generators.random import RandomSourceGenerator
from augtasks.registry import (
    get_task,
    all_task_names,
    all_task_param_keys,
    param_defaults_from_tasks,
)
from augtasks.summary import describe_batch, format_example, summary_row


def _load_config(path: str) -> dict:
    import yaml
    with open(path) as f:
        return yaml.safe_load(f) or {}


# Keys that can be swept (list = dimension) or fixed (scalar). Used by stats command.
# task_params.* are flattened into the config (e.g. task_params.bit_len -> bit_len).
SWEEP_PARAM_KEYS = [
    "task",
    *sorted(all_task_param_keys()),
    "batch_size", "fixed_length", "seed",
]
SWEEP_DEFAULTS = {
    "task": "add",
    "batch_size": 64,
    "fixed_length": False,
    "seed": None,
    **param_defaults_from_tasks(),
}


def _flatten_task_params(config: dict) -> dict:
    """Merge task_params into flat config. task_params.bit_len -> bit_len."""
    cfg = dict(config)
    if "task_params" in cfg and isinstance(cfg["task_params"], dict):
        params = cfg.pop("task_params")
        for k, v in params.items():
            cfg[k] = v
    return cfg


def _expand_sweep_config(config: dict) -> list[dict]:
    """Expand a config into a list of run configs. List values → Cartesian product."""
    cfg = _flatten_task_params(config)
    fixed = {}
    dims = {}
    for k in SWEEP_PARAM_KEYS:
        v = cfg.get(k, SWEEP_DEFAULTS.get(k))
        if isinstance(v, list):
            dims[k] = v
        else:
            fixed[k] = v
    if not dims:
        return [fixed]
    keys = list(dims.keys())
    return [
        {**fixed, **dict(zip(keys, combo))}
        for combo in itertools.product(*(dims[k] for k in keys))
    ]


def _build_task(args, config: dict):
    """Resolve task name and constructor params from args + config. Build generator and task."""
    task_name = (getattr(args, "task", None) or config.get("task") or "").lower()
    task_info = get_task(task_name)
    if task_info is None:
        raise SystemExit(f"Unknown task: {task_name}. Use: {', '.join(all_task_names())}.")

    seed = getattr(args, "seed", None)
    if seed is None:
        seed = config.get("seed")
    generator = RandomSourceGenerator(seed=seed)

    defaults = task_info["param_defaults"]
    task_kwargs = {}
    for k in task_info["constructor_params"]:
        v = getattr(args, k, None)
        task_kwargs[k] = v if v is not None else config.get(k, defaults.get(k))
    return task_name, task_info["cls"](**task_kwargs, generator=generator)


def _generate(task_name: str, task, batch_size: int, fixed_length: bool):
    if task_name == "add":
        return task.generate(batch_size, fixed_length=fixed_length)
    return task.generate(batch_size)


def _args_from_run_config(run_config: dict):
    """Build an args-like object from a flat run config (for stats sweeps)."""
    return SimpleNamespace(
        task=run_config.get("task", "add"),
        seed=run_config.get("seed"),
        **{k: run_config.get(k) for k in all_task_param_keys()},
    )


def _run_one_config(run_config: dict) -> dict:
    """Generate one batch for a run config; return one summary row (params + length stats)."""
    args = _args_from_run_config(run_config)
    task_name, task = _build_task(args, run_config)
    batch_size = int(run_config.get("batch_size") or SWEEP_DEFAULTS["batch_size"])
    fixed_length = bool(run_config.get("fixed_length"))
    inputs, labels = _generate(task_name, task, batch_size, fixed_length)
    info = get_task(task_name)
    row = {"task": task_name}
    row.update({k: getattr(task, k) for k in info["constructor_params"]})
    row.update({
        "batch_size": batch_size,
        "fixed_length": fixed_length if task_name == "add" else None,
        "seed": task.generator.seed,
    })
    return summary_row(row, inputs, labels)


def cmd_generate(args):
    config = {}
    if getattr(args, "config", None):
        config = _load_config(args.config)
    config = _flatten_task_params(config)

    task_name, task = _build_task(args, config)
    batch_size = args.batch_size or config.get("batch_size", 8)
    fixed_length = args.fixed_length or bool(config.get("fixed_length", False))
    inputs, labels = _generate(task_name, task, batch_size, fixed_length)

    print(f"Task: {task_name} (seed={task.generator.seed}, batch_size={batch_size})")
    n_examples = min(args.examples, batch_size)
    print("\nExamples:")
    for i in range(n_examples):
        print(f"\nExample {i + 1}:")
        print(format_example(task, inputs[i], labels[i]))
    print("\nLengths:")
    print(describe_batch(inputs, labels).to_string())


def cmd_stats(args):
    """Summarise generated batches for one config or a grid of configs (list values = grid)."""
    if args.config:
        config = _load_config(args.config)
        if "sweep" in config and isinstance(config.get("sweep"), dict):
            expand_config = {k: v for k, v in config.items() if k != "sweep"}
            expand_config.update(config["sweep"])
        else:
            expand_config = config
    else:
        expand_config = {}
    overrides = {
        "task": args.task,
        "batch_size": args.batch_size,
        "seed": args.seed,
        **{k: getattr(args, k, None) for k in all_task_param_keys()},
    }
    expand_config.update({k: v for k, v in overrides.items() if v is not None})
    if args.fixed_length:
        expand_config["fixed_length"] = True

    run_configs = _expand_sweep_config(expand_config)
    n = len(run_configs)
    print(f"Stats: {n} configuration(s)")
    rows = []
    for i, run_config in enumerate(run_configs):
        print(f"  [{i + 1}/{n}] task={run_config['task']} batch_size={run_config['batch_size']}")
        rows.append(_run_one_config(run_config))
    print(pd.DataFrame(rows).to_string(index=False))


def cmd_list(args):
    if args.tasks:
        print("Tasks:")
        for name in all_task_names():
            info = get_task(name)
            desc = info["description"] if info else ""
            print(f"  {name:12} – {desc}")
        return
    if args.config:
        print("Defaults (use augtasks generate -c path/to/config.yaml to override):")
        for k, v in sorted(SWEEP_DEFAULTS.items()):
            print(f"  {k}: {v}")
        return
    # default: summary
    print("augtasks – synthetic sequence tasks for memory-augmented models")
    print()
    print(f"Tasks:   {', '.join(all_task_names())}")
    print()
    print("Usage:   augtasks generate --task <task> [options]")
    print("         augtasks stats -c <sweep.yaml>  (one config, many params)")
    print("         augtasks list [--tasks | --config]")


def cmd_version(args):
    try:
        print(version("augtasks"))
    except PackageNotFoundError:
        print("Version unknown (package not installed)")


def _add_task_args(p):
    p.add_argument("--bit-len", type=int, default=None, help="Add: maximum operand length in bits")
    p.add_argument("--max-length", type=int, default=None, help="Copy: maximum base sequence length")
    p.add_argument("--n-repeats", type=int, default=None, help="Copy: number of repetitions")
    p.add_argument("-b", "--batch-size", type=int, default=None, help="Batch size")
    p.add_argument("--fixed-length", action="store_true", help="Add: use bit_len for both operands")
    p.add_argument("--seed", type=int, default=None, help="Random seed")


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="augtasks",
        description="augtasks CLI: generate Add/Copy task batches and inspect them.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # generate
    gen_p = subparsers.add_parser("generate", help="Generate one batch and print examples")
    gen_p.add_argument("-t", "--task", default=None, choices=all_task_names(), help="Task name")
    _add_task_args(gen_p)
    gen_p.add_argument("-n", "--examples", type=int, default=3, help="Number of examples to print")
    gen_p.add_argument("-c", "--config", default=None, help="YAML config path (overrides with CLI)")
    gen_p.set_defaults(func=cmd_generate)

    # stats: one config file, list values = parameter grid (Cartesian product)
    stats_p = subparsers.add_parser(
        "stats",
        help="Summarise batch lengths; use lists in YAML to sweep parameters.",
    )
    stats_p.add_argument("-t", "--task", default=None, choices=all_task_names(), help="Task name")
    _add_task_args(stats_p)
    stats_p.add_argument(
        "-c", "--config",
        default=None,
        help="Sweep YAML path (e.g. configs/sweep.yaml). List values = grid dimension.",
    )
    stats_p.set_defaults(func=cmd_stats)

    # list
    list_p = subparsers.add_parser("list", help="List tasks or default config")
    list_p.add_argument("--tasks", action="store_true", help="List available tasks")
    list_p.add_argument("--config", action="store_true", help="Show default config values")
    list_p.set_defaults(func=cmd_list)

    # version
    version_p = subparsers.add_parser("version", help="Show augtasks version")
    version_p.set_defaults(func=cmd_version)

    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
