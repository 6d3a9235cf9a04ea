from .single_ride_appender import SingleRideAppender
