import logging
from collections.abc import Mapping

log = logging.getLogger(__name__)


def reconstruct_path(prev: Mapping[str, str | None], source: str, destination: str) -> list[str]:
    """
    Walk predecessors back from ``destination``.

    Returns the source..destination sequence, or [] when the chain does not
    end at ``source``. A predecessor cycle (left behind by a negative cycle)
    also yields [].
    """
    rev = [destination]
    seen = {destination}
    cur = prev.get(destination)
    while cur is not None:
        if cur in seen:
            log.warning("predecessor cycle at %s while tracing %s -> %s", cur, source, destination)
            return []
        seen.add(cur)
        rev.append(cur)
        cur = prev.get(cur)
    if rev[-1] != source:
        return []
    rev.reverse()
    return rev
