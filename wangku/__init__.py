"""Malaysian savings, dividend and goal projections."""
