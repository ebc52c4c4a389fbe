"""Services Layer: orchestration of pure core steps around upstream IO."""
