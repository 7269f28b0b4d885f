"""Five-balls variant: eight colours, upcoming balls and A* movement."""