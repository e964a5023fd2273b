from PyLinComp.Tools.LFSRTools import (
    satisfies_recurrence,
    brute_force_linear_complexity,
    characteristic_polynomial,
    is_maximal_length,
)
