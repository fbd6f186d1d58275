"""Draw steps. Each module registers one step with @draw_step."""
