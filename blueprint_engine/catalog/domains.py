"""Domain definitions with base stacks and controller templates."""

from __future__ import annotations

import textwrap
from types import MappingProxyType
from typing import Mapping

from .models import Domain, DomainDefinition, FeatureKey, SnippetTemplate, StackSpec


# ---------------------------------------------------------------------------
# Shared stack fragments
# ---------------------------------------------------------------------------

_SPRING_BACKEND: tuple[str, ...] = ("Java 17", "Spring Boot 3", "Spring Web")
_NEXT_FRONTEND: tuple[str, ...] = ("Next.js 14", "TypeScript", "Tailwind CSS")
_TOOLING: tuple[str, ...] = ("Maven", "Docker Compose", "GitHub Actions")


def _controller(source: str) -> str:
    return textwrap.dedent(source).strip("\n")


# ---------------------------------------------------------------------------
# Domain table
# ---------------------------------------------------------------------------

_DOMAINS: tuple[DomainDefinition, ...] = (
    DomainDefinition(
        key=Domain.STUDENT_PORTAL,
        label="Student Portal",
        description="Course registration, attendance, grades, and announcements for a campus.",
        base_stack=StackSpec(
            backend=_SPRING_BACKEND + ("Spring Data JPA",),
            frontend=_NEXT_FRONTEND,
            database=("PostgreSQL",),
            tooling=_TOOLING,
        ),
        implied_features=frozenset({FeatureKey.AUTHENTICATION}),
        snippet_template=SnippetTemplate(
            description="A REST controller that lists and enrolls students in courses.",
            code=_controller(
                """
                @RestController
                @RequestMapping("/api/courses")
                public class CourseController {

                    private final CourseService service;

                    public CourseController(CourseService service) {
                        this.service = service;
                    }

                    @GetMapping
                    public List<CourseDto> list() {
                        return service.findAll();
                    }

                    @PostMapping("/{id}/enroll")
                    public ResponseEntity<EnrollmentDto> enroll(@PathVariable Long id, @RequestParam Long studentId) {
                        return ResponseEntity.ok(service.enroll(id, studentId));
                    }
                }
                """
            ),
        ),
    ),
    DomainDefinition(
        key=Domain.E_COMMERCE,
        label="E-Commerce Store",
        description="Product catalog, cart, orders, and checkout for an online shop.",
        base_stack=StackSpec(
            backend=_SPRING_BACKEND + ("Spring Data JPA", "Spring Cache"),
            frontend=_NEXT_FRONTEND + ("Zustand",),
            database=("PostgreSQL", "Redis"),
            tooling=_TOOLING,
        ),
        implied_features=frozenset({FeatureKey.AUTHENTICATION, FeatureKey.PAYMENTS, FeatureKey.SEARCH}),
        snippet_template=SnippetTemplate(
            description="A product controller with paginated listing and order placement.",
            code=_controller(
                """
                @RestController
                @RequestMapping("/api/products")
                public class ProductController {

                    private final ProductService service;

                    public ProductController(ProductService service) {
                        this.service = service;
                    }

                    @GetMapping
                    public Page<ProductDto> list(Pageable pageable) {
                        return service.findAll(pageable);
                    }

                    @PostMapping("/{id}/orders")
                    public ResponseEntity<OrderDto> order(@PathVariable Long id, @RequestParam int quantity) {
                        return ResponseEntity.status(HttpStatus.CREATED).body(service.placeOrder(id, quantity));
                    }
                }
                """
            ),
        ),
    ),
    DomainDefinition(
        key=Domain.HEALTHCARE,
        label="Healthcare Appointments",
        description="Patient records, doctor schedules, and appointment booking for a clinic.",
        base_stack=StackSpec(
            backend=_SPRING_BACKEND + ("Spring Data JPA", "Spring Validation"),
            frontend=_NEXT_FRONTEND + ("FullCalendar",),
            database=("MySQL",),
            tooling=_TOOLING,
        ),
        implied_features=frozenset({FeatureKey.AUTHENTICATION, FeatureKey.NOTIFICATIONS}),
        snippet_template=SnippetTemplate(
            description="An appointment controller that books and lists patient visits.",
            code=_controller(
                """
                @RestController
                @RequestMapping("/api/appointments")
                public class AppointmentController {

                    private final AppointmentService service;

                    public AppointmentController(AppointmentService service) {
                        this.service = service;
                    }

                    @GetMapping
                    public List<AppointmentDto> list(@RequestParam Long doctorId) {
                        return service.findByDoctor(doctorId);
                    }

                    @PostMapping
                    public ResponseEntity<AppointmentDto> book(@Valid @RequestBody AppointmentRequest request) {
                        return ResponseEntity.status(HttpStatus.CREATED).body(service.book(request));
                    }
                }
                """
            ),
        ),
    ),
    DomainDefinition(
        key=Domain.EVENT_MANAGEMENT,
        label="Event Management",
        description="Event listings, registrations, and ticketing for clubs and fests.",
        base_stack=StackSpec(
            backend=_SPRING_BACKEND + ("Spring Data JPA",),
            frontend=_NEXT_FRONTEND,
            database=("PostgreSQL",),
            tooling=_TOOLING,
        ),
        implied_features=frozenset({FeatureKey.NOTIFICATIONS}),
        snippet_template=SnippetTemplate(
            description="An event controller for upcoming events and attendee registration.",
            code=_controller(
                """
                @RestController
                @RequestMapping("/api/events")
                public class EventController {

                    private final EventService service;

                    public EventController(EventService service) {
                        this.service = service;
                    }

                    @GetMapping("/upcoming")
                    public List<EventDto> upcoming() {
                        return service.findUpcoming();
                    }

                    @PostMapping("/{id}/registrations")
                    public ResponseEntity<RegistrationDto> register(@PathVariable Long id, @RequestParam Long attendeeId) {
                        return ResponseEntity.status(HttpStatus.CREATED).body(service.register(id, attendeeId));
                    }
                }
                """
            ),
        ),
    ),
    DomainDefinition(
        key=Domain.LIBRARY_MANAGEMENT,
        label="Library Management",
        description="Book catalog, member loans, returns, and fines for a library.",
        base_stack=StackSpec(
            backend=_SPRING_BACKEND + ("Spring Data JPA",),
            frontend=_NEXT_FRONTEND,
            database=("MySQL",),
            tooling=_TOOLING,
        ),
        implied_features=frozenset({FeatureKey.CRUD, FeatureKey.SEARCH}),
        snippet_template=SnippetTemplate(
            description="A book controller that lists titles and issues loans to members.",
            code=_controller(
                """
                @RestController
                @RequestMapping("/api/books")
                public class BookController {

                    private final BookService service;

                    public BookController(BookService service) {
                        this.service = service;
                    }

                    @GetMapping
                    public List<BookDto> list() {
                        return service.findAll();
                    }

                    @PostMapping("/{id}/loans")
                    public ResponseEntity<LoanDto> issue(@PathVariable Long id, @RequestParam Long memberId) {
                        return ResponseEntity.status(HttpStatus.CREATED).body(service.issue(id, memberId));
                    }
                }
                """
            ),
        ),
    ),
)


DOMAIN_DEFINITIONS: Mapping[Domain, DomainDefinition] = MappingProxyType(
    {definition.key: definition for definition in _DOMAINS}
)
