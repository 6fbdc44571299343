from rest_framework.routers import DefaultRouter

from room.views import RoomTypeViewSet

app_name = "room"

router = DefaultRouter()
router.register("rooms", RoomTypeViewSet, basename="rooms")

urlpatterns = router.urls
