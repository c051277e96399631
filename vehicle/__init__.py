"""Engine, drivetrain, tire and shift-curve formulas."""
