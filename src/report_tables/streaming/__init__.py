"""Streaming side of the engine: buffering, debounced publishing, and scroll animation.

Submodules:
  events      -- SSE 'data:' payload decoding into stream events
  scroll      -- cancellable eased scroll-to-bottom animation
  reconciler  -- buffer owner that reprocesses and publishes on a debounce
"""
