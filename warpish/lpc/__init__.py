"""Shell detection, syntax checks and command translation between shells."""