"""Fixed thresholds and weights for each strategy profile."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CautiousParams:
    low_health: float = 0.5
    type_disadvantage: float = 0.5
    shield_probability: float = 0.3

    # switch candidate weights (unnormalized, ranking only)
    switch_type_weight: float = 0.4
    switch_defense_weight: float = 0.5
    switch_health_weight: float = 0.3
    switch_random_weight: float = 0.1

    # move weights
    status_move_bonus: float = 0.7
    stat_drop_bonus: float = 0.3
    move_type_weight: float = 0.2
    move_accuracy_weight: float = 0.1
    move_random_weight: float = 0.1


@dataclass(frozen=True)
class OptimizingParams:
    critical_health: float = 0.25
    low_health: float = 0.5
    type_disadvantage: float = 0.5

    # missing-hp floors for each heal tier
    mega_heal_missing: int = 100
    hyper_heal_missing: int = 50
    super_heal_missing: int = 25
    basic_heal_probability: float = 0.8

    base_switch_probability: float = 0.35
    switch_type_penalty: float = 0.3
    switch_health_penalty: float = 0.2
    max_switch_probability: float = 0.8

    switch_type_weight: float = 0.4
    switch_defense_weight: float = 0.3
    switch_health_weight: float = 0.2
    switch_random_weight: float = 0.1

    move_type_weight: float = 0.3
    move_power_weight: float = 0.25
    move_status_weight: float = 0.25
    move_accuracy_weight: float = 0.15
    move_pp_weight: float = 0.05
    power_scale: float = 150.0


CAUTIOUS = CautiousParams()
OPTIMIZING = OptimizingParams()
