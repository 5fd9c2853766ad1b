"""Frame-driven UI runtime: navigation, slide animation and modal prompts."""
