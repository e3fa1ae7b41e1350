"""Front ends that drive a WorkoutStore."""
