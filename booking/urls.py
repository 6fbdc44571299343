from rest_framework.routers import DefaultRouter

from booking.views import BookingViewSet

app_name = "booking"

router = DefaultRouter(trailing_slash=True)
router.register("booking", BookingViewSet, basename="booking")

urlpatterns = router.urls
