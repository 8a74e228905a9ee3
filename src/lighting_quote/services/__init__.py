"""Services subpackage - rate sheets and quote summaries built on the engine."""
