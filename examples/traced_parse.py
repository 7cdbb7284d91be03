from __future__ import annotations

import logging

from mparse import Trace, bind, item, result, sequence

# Parser runs are logged at DEBUG by mparse.kernel.parser
logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


def run_traced(text: str) -> Trace:
    trace = Trace()
    pair = sequence(item(), item())
    swapped = bind(pair, lambda p: result(p[1] + p[0]))
    print(swapped.parse(text, trace=trace))
    return trace


if __name__ == "__main__":
    trace = run_traced("brol")
    for ev in trace.get_events():
        print(ev.id, ev.parent_id, ev.action, ev.info, ev.duration_ms)
    print(trace.as_tree())
