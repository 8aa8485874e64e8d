"""Local-first project journal: activities, Gantt projections and summaries."""
