from .registry import Registry, BruteForceRegistry
from .predictive import PredictiveRegistry
from .shift_reduce import ShiftReduceRegistry


MATCHING_METHODS = {
	'naive': BruteForceRegistry,
	'LL1': PredictiveRegistry,
	'SLR1': ShiftReduceRegistry,
}

def make_registry(method='naive', **options) -> Registry:
	""" Options go to the chosen registry's constructor; only "naive" takes any (max_depth). """
	return MATCHING_METHODS[method](**options)
