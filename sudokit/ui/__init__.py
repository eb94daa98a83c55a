"""Layout values, flex styles, geometry and the flex layout pass for game screens."""