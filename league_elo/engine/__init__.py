"""Match recording and batch processing."""
