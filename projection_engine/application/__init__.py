"""Application layer: simulators and result export."""
