"""
Sequential saving plan ids, starting at 1
"""

from savingbank.data.core.virtual_sequence_generator import VirtualSequenceGenerator


class PlanIDManager(VirtualSequenceGenerator):
    table_name = "_sequence_plan_id"
