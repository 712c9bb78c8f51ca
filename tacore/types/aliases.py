# -------- Aliases (clarify intent) --------
ValueType = float
Shape = tuple[int, int]  # (raw_count, signal_count)
ParamText = str  # textual parameter value as received from files / CLI / tuning loops
UnixMillis = int
